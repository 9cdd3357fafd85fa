"""Version probe and health check endpoints."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from videocat.config import Config

router = APIRouter(tags=["health"], route_class=DishkaRoute)


@router.get("/")
async def version(config: FromDishka[Config]) -> dict:
    """Report which build is deployed."""
    return {"version": config.server.version}


@router.get("/health")
async def health(config: FromDishka[Config]) -> dict:
    return {
        "status": "healthy",
        "version": config.server.version,
    }
