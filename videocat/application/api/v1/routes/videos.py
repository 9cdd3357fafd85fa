"""Video REST routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Response, status

from videocat.domain.shared.error import NotFoundError
from videocat.domain.video.command.create import CreateVideo, CreateVideoHandler
from videocat.domain.video.command.delete import DeleteVideo, DeleteVideoHandler
from videocat.domain.video.command.update import UpdateVideo, UpdateVideoHandler
from videocat.domain.video.model.aggregate import Video
from videocat.domain.video.model.value import VideoId
from videocat.domain.video.query.get_video import GetVideo, GetVideoHandler
from videocat.domain.video.query.list_videos import ListVideos, ListVideosHandler
from videocat.domain.video.service.video import VIDEO_NOT_FOUND

# Mounted under config.paths.videos by the app factory
router = APIRouter(tags=["Videos"], route_class=DishkaRoute)


def _parse_video_id(raw: str) -> VideoId:
    """Path ids that are not plain decimal integers cannot name a video."""
    # int() alone also accepts "1_0", " 1" and non-ASCII digits
    if not (raw.isascii() and raw.isdigit()):
        raise NotFoundError(VIDEO_NOT_FOUND)
    return VideoId(int(raw))


@router.get("", response_model=list[Video])
async def list_videos(
    handler: FromDishka[ListVideosHandler],
) -> list[Video]:
    result = await handler.run(ListVideos())
    return result.items


@router.get("/{video_id}", response_model=Video)
async def get_video(
    video_id: str,
    handler: FromDishka[GetVideoHandler],
) -> Video:
    result = await handler.run(GetVideo(id=_parse_video_id(video_id)))
    return result.video


@router.post("", response_model=Video, status_code=status.HTTP_201_CREATED)
async def create_video(
    handler: FromDishka[CreateVideoHandler],
    body: Any = Body(None),
) -> Video:
    result = await handler.run(CreateVideo(body=body))
    return result.video


@router.put("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_video(
    video_id: str,
    handler: FromDishka[UpdateVideoHandler],
    body: Any = Body(None),
) -> Response:
    await handler.run(UpdateVideo(id=_parse_video_id(video_id), body=body))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_video(
    video_id: str,
    handler: FromDishka[DeleteVideoHandler],
) -> Response:
    await handler.run(DeleteVideo(id=_parse_video_id(video_id)))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
