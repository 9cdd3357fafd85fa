"""In-memory implementation of VideoRepository."""

import itertools
import logging
import threading
from collections.abc import Callable
from datetime import datetime, timedelta

from videocat.domain.video.model.aggregate import Video
from videocat.domain.video.model.value import (
    NewVideo,
    VideoId,
    VideoPatch,
    utc_now,
)
from videocat.domain.video.port.repository import VideoRepository

logger = logging.getLogger(__name__)


class InMemoryVideoRepository(VideoRepository):
    """Insertion-ordered list of videos guarded by a single lock.

    Every operation runs under the lock, so concurrent requests cannot
    interleave an id allocation or a read-modify-write of a video.
    """

    def __init__(
        self,
        publication_offset: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._videos: list[Video] = []
        self._ids = itertools.count(1)
        self._lock = threading.RLock()
        self._publication_offset = publication_offset
        self._clock = clock

    async def insert(self, fields: NewVideo) -> Video:
        with self._lock:
            created_at = self._clock()
            video = Video(
                id=VideoId(next(self._ids)),
                title=fields.title,
                author=fields.author,
                can_be_downloaded=fields.can_be_downloaded,
                min_age_restriction=fields.min_age_restriction,
                created_at=created_at,
                publication_date=fields.publication_date or created_at + self._publication_offset,
                available_resolutions=list(fields.available_resolutions),
            )
            self._videos.append(video)
            return video

    async def get(self, video_id: VideoId) -> Video | None:
        with self._lock:
            return self._find(video_id)

    async def update(self, video_id: VideoId, patch: VideoPatch) -> Video | None:
        with self._lock:
            video = self._find(video_id)
            if video is None:
                return None
            video.apply(patch)
            return video

    async def delete(self, video_id: VideoId) -> bool:
        with self._lock:
            for index, video in enumerate(self._videos):
                if video.id == video_id:
                    del self._videos[index]
                    return True
            return False

    async def list_all(self) -> list[Video]:
        with self._lock:
            return list(self._videos)

    async def clear(self) -> int:
        # The id sequence keeps running: ids stay unique across clears
        with self._lock:
            removed = len(self._videos)
            self._videos.clear()
            return removed

    async def count(self) -> int:
        with self._lock:
            return len(self._videos)

    def _find(self, video_id: VideoId) -> Video | None:
        return next((v for v in self._videos if v.id == video_id), None)
