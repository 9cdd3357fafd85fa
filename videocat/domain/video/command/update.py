from typing import Any

import logfire

from videocat.domain.shared.command import Command, CommandHandler, Result
from videocat.domain.video.model.value import VideoId
from videocat.domain.video.service.video import VideoService


class UpdateVideo(Command):
    id: VideoId
    body: Any = None


class VideoUpdated(Result):
    id: VideoId


class UpdateVideoHandler(CommandHandler[UpdateVideo, VideoUpdated]):
    video_service: VideoService

    async def run(self, cmd: UpdateVideo) -> VideoUpdated:
        await self.video_service.update(cmd.id, cmd.body)
        logfire.info("Video updated", video_id=cmd.id)
        return VideoUpdated(id=cmd.id)
