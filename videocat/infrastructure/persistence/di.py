from datetime import timedelta

from dishka import provide

from videocat.config import Config
from videocat.domain.video.port.repository import VideoRepository
from videocat.infrastructure.persistence.memory import InMemoryVideoRepository
from videocat.util.di.base import Provider
from videocat.util.di.scope import Scope


class PersistenceProvider(Provider):
    @provide(scope=Scope.APP)
    def get_video_repo(self, config: Config) -> VideoRepository:
        # One store per container: it lives exactly as long as the app
        return InMemoryVideoRepository(
            publication_offset=timedelta(hours=config.videos.publication_offset_hours),
        )
