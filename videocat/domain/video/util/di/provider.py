from dishka import provide

from videocat.config import Config
from videocat.domain.video.command.create import CreateVideoHandler
from videocat.domain.video.command.delete import DeleteVideoHandler
from videocat.domain.video.command.reset import ResetDataHandler
from videocat.domain.video.command.update import UpdateVideoHandler
from videocat.domain.video.query.get_video import GetVideoHandler
from videocat.domain.video.query.list_videos import ListVideosHandler
from videocat.domain.video.service.validation import VideoRules
from videocat.domain.video.service.video import VideoService
from videocat.util.di.base import Provider
from videocat.util.di.scope import Scope


class VideoProvider(Provider):
    @provide(scope=Scope.APP)
    def get_video_rules(self, config: Config) -> VideoRules:
        return VideoRules(
            title_max_length=config.videos.title_max_length,
            author_max_length=config.videos.author_max_length,
            max_age_restriction=config.videos.max_age_restriction,
        )

    service = provide(VideoService, scope=Scope.UOW)

    # Command Handlers
    create_handler = provide(CreateVideoHandler, scope=Scope.UOW)
    update_handler = provide(UpdateVideoHandler, scope=Scope.UOW)
    delete_handler = provide(DeleteVideoHandler, scope=Scope.UOW)
    reset_handler = provide(ResetDataHandler, scope=Scope.UOW)

    # Query Handlers
    get_video_handler = provide(GetVideoHandler, scope=Scope.UOW)
    list_videos_handler = provide(ListVideosHandler, scope=Scope.UOW)
