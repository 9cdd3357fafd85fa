from videocat.domain.video.util.di.provider import VideoProvider

__all__ = ["VideoProvider"]
