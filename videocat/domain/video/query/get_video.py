from videocat.domain.shared.command import Result
from videocat.domain.shared.query import Query, QueryHandler
from videocat.domain.video.model.aggregate import Video
from videocat.domain.video.model.value import VideoId
from videocat.domain.video.service.video import VideoService


class GetVideo(Query):
    id: VideoId


class VideoDetail(Result):
    video: Video


class GetVideoHandler(QueryHandler[GetVideo, VideoDetail]):
    video_service: VideoService

    async def run(self, query: GetVideo) -> VideoDetail:
        return VideoDetail(video=await self.video_service.get(query.id))
