"""VideoService - validates payloads and drives the video store."""

import logging
from typing import Any

from videocat.domain.shared.error import NotFoundError, ValidationError
from videocat.domain.shared.service import Service
from videocat.domain.video.model.aggregate import Video
from videocat.domain.video.model.value import VideoId
from videocat.domain.video.port.repository import VideoRepository
from videocat.domain.video.service.validation import (
    ValidationMode,
    VideoPayload,
    VideoRules,
    validate_video,
)

logger = logging.getLogger(__name__)

VIDEO_NOT_FOUND = "Video not found"


class VideoService(Service):
    video_repo: VideoRepository
    rules: VideoRules

    def _validate(self, body: Any, mode: ValidationMode) -> VideoPayload:
        payload = VideoPayload.decode(body)
        errors = validate_video(payload, mode, self.rules)
        if errors:
            logger.debug("Rejected %s payload: %s", mode, [e.field for e in errors])
            raise ValidationError(errors)
        return payload

    async def create(self, body: Any) -> Video:
        payload = self._validate(body, ValidationMode.CREATE)
        video = await self.video_repo.insert(payload.to_new_video())
        logger.debug("Video created: %s", video.id)
        return video

    async def get(self, video_id: VideoId) -> Video:
        video = await self.video_repo.get(video_id)
        if video is None:
            raise NotFoundError(VIDEO_NOT_FOUND)
        return video

    async def list_all(self) -> list[Video]:
        return await self.video_repo.list_all()

    async def update(self, video_id: VideoId, body: Any) -> Video:
        # Existence is checked before validation: a missing id is always a 404
        await self.get(video_id)
        payload = self._validate(body, ValidationMode.UPDATE)
        video = await self.video_repo.update(video_id, payload.to_patch())
        if video is None:
            raise NotFoundError(VIDEO_NOT_FOUND)
        logger.debug("Video updated: %s fields=%s", video_id, sorted(payload.model_fields_set))
        return video

    async def delete(self, video_id: VideoId) -> None:
        if not await self.video_repo.delete(video_id):
            raise NotFoundError(VIDEO_NOT_FOUND)
        logger.debug("Video deleted: %s", video_id)

    async def reset(self) -> int:
        """Remove every video. Returns how many were removed."""
        removed = await self.video_repo.clear()
        logger.info("Video store cleared (%d removed)", removed)
        return removed
