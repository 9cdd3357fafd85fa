"""Testing utilities: wipe all data between test runs."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from videocat.domain.video.command.reset import ResetData, ResetDataHandler

# Mounted once per entry of config.paths.testing by the app factory
router = APIRouter(tags=["Testing"], route_class=DishkaRoute)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def reset_data(
    handler: FromDishka[ResetDataHandler],
) -> Response:
    await handler.run(ResetData())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
