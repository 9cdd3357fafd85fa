import logfire

from videocat.domain.shared.command import Command, CommandHandler, Result
from videocat.domain.video.model.value import VideoId
from videocat.domain.video.service.video import VideoService


class DeleteVideo(Command):
    id: VideoId


class VideoDeleted(Result):
    id: VideoId


class DeleteVideoHandler(CommandHandler[DeleteVideo, VideoDeleted]):
    video_service: VideoService

    async def run(self, cmd: DeleteVideo) -> VideoDeleted:
        await self.video_service.delete(cmd.id)
        logfire.info("Video deleted", video_id=cmd.id)
        return VideoDeleted(id=cmd.id)
