"""Testing utility: wipe the catalogue. The id sequence keeps counting."""

import logfire

from videocat.domain.shared.command import Command, CommandHandler, Result
from videocat.domain.video.service.video import VideoService


class ResetData(Command): ...


class DataReset(Result):
    removed: int


class ResetDataHandler(CommandHandler[ResetData, DataReset]):
    video_service: VideoService

    async def run(self, cmd: ResetData) -> DataReset:
        removed = await self.video_service.reset()
        logfire.info("Video store reset", removed=removed)
        return DataReset(removed=removed)
