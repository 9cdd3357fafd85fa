from typing import Any

import logfire

from videocat.domain.shared.command import Command, CommandHandler, Result
from videocat.domain.video.model.aggregate import Video
from videocat.domain.video.service.video import VideoService


class CreateVideo(Command):
    body: Any = None


class VideoCreated(Result):
    video: Video


class CreateVideoHandler(CommandHandler[CreateVideo, VideoCreated]):
    video_service: VideoService

    async def run(self, cmd: CreateVideo) -> VideoCreated:
        video = await self.video_service.create(cmd.body)
        logfire.info("Video created", video_id=video.id)
        return VideoCreated(video=video)
