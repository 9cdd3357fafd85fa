"""Video domain model."""

from videocat.domain.video.model.aggregate import Video
from videocat.domain.video.model.value import NewVideo, Resolution, VideoId, VideoPatch

__all__ = ["NewVideo", "Resolution", "Video", "VideoId", "VideoPatch"]
