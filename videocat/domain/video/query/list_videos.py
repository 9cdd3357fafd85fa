from videocat.domain.shared.command import Result
from videocat.domain.shared.query import Query, QueryHandler
from videocat.domain.video.model.aggregate import Video
from videocat.domain.video.service.video import VideoService


class ListVideos(Query): ...


class VideoList(Result):
    items: list[Video]


class ListVideosHandler(QueryHandler[ListVideos, VideoList]):
    video_service: VideoService

    async def run(self, query: ListVideos) -> VideoList:
        return VideoList(items=await self.video_service.list_all())
