"""VideoRepository port - storage interface for videos."""

from abc import abstractmethod
from typing import Protocol

from videocat.domain.shared.port import Port
from videocat.domain.video.model.aggregate import Video
from videocat.domain.video.model.value import NewVideo, VideoId, VideoPatch


class VideoRepository(Port, Protocol):
    """Ordered collection of videos with a store-owned id sequence.

    Ids start at 1 and are never reused, not even after ``clear()``.
    Absence is reported as ``None``/``False``, never as an exception.
    """

    @abstractmethod
    async def insert(self, fields: NewVideo) -> Video: ...

    @abstractmethod
    async def get(self, video_id: VideoId) -> Video | None: ...

    @abstractmethod
    async def update(self, video_id: VideoId, patch: VideoPatch) -> Video | None: ...

    @abstractmethod
    async def delete(self, video_id: VideoId) -> bool: ...

    @abstractmethod
    async def list_all(self) -> list[Video]: ...

    @abstractmethod
    async def clear(self) -> int:
        """Remove every video and return how many were removed."""
        ...

    @abstractmethod
    async def count(self) -> int: ...
