from dishka import AsyncContainer, from_context, make_async_container
from starlette.requests import Request

from videocat.config import Config
from videocat.domain.video.util.di import VideoProvider
from videocat.infrastructure.persistence import PersistenceProvider
from videocat.util.di.base import Provider
from videocat.util.di.scope import Scope


class ContextProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)
    request = from_context(provides=Request, scope=Scope.UOW)


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    return make_async_container(
        ContextProvider(),
        PersistenceProvider(),
        VideoProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
