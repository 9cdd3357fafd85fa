"""Tests for video command and query handlers."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from videocat.domain.shared.error import NotFoundError
from videocat.domain.video.command.create import CreateVideo, CreateVideoHandler
from videocat.domain.video.command.delete import DeleteVideo, DeleteVideoHandler
from videocat.domain.video.command.reset import ResetData, ResetDataHandler
from videocat.domain.video.command.update import UpdateVideo, UpdateVideoHandler
from videocat.domain.video.model.aggregate import Video
from videocat.domain.video.model.value import Resolution, VideoId
from videocat.domain.video.query.get_video import GetVideo, GetVideoHandler
from videocat.domain.video.query.list_videos import ListVideos, ListVideosHandler


def _make_video() -> Video:
    created = datetime(2024, 1, 1, tzinfo=UTC)
    return Video(
        id=VideoId(7),
        title="T",
        author="A",
        created_at=created,
        publication_date=created,
        available_resolutions=[Resolution.P720],
    )


class TestCreateVideoHandler:
    @pytest.mark.asyncio
    async def test_returns_created_video(self):
        video = _make_video()
        service = AsyncMock()
        service.create.return_value = video

        handler = CreateVideoHandler(video_service=service)
        body = {"title": "T", "author": "A", "availableResolutions": ["P720"]}
        result = await handler.run(CreateVideo(body=body))

        assert result.video is video
        service.create.assert_called_once_with(body)


class TestUpdateVideoHandler:
    @pytest.mark.asyncio
    async def test_passes_id_and_body(self):
        service = AsyncMock()

        handler = UpdateVideoHandler(video_service=service)
        result = await handler.run(UpdateVideo(id=VideoId(7), body={"title": "New"}))

        assert result.id == 7
        service.update.assert_called_once_with(7, {"title": "New"})


class TestDeleteVideoHandler:
    @pytest.mark.asyncio
    async def test_raises_not_found(self):
        service = AsyncMock()
        service.delete.side_effect = NotFoundError("Video not found")

        handler = DeleteVideoHandler(video_service=service)

        with pytest.raises(NotFoundError):
            await handler.run(DeleteVideo(id=VideoId(7)))


class TestResetDataHandler:
    @pytest.mark.asyncio
    async def test_reports_removed_count(self):
        service = AsyncMock()
        service.reset.return_value = 2

        handler = ResetDataHandler(video_service=service)
        result = await handler.run(ResetData())

        assert result.removed == 2


class TestQueryHandlers:
    @pytest.mark.asyncio
    async def test_get_video(self):
        video = _make_video()
        service = AsyncMock()
        service.get.return_value = video

        handler = GetVideoHandler(video_service=service)
        result = await handler.run(GetVideo(id=VideoId(7)))

        assert result.video is video
        service.get.assert_called_once_with(7)

    @pytest.mark.asyncio
    async def test_list_videos(self):
        video = _make_video()
        service = AsyncMock()
        service.list_all.return_value = [video]

        handler = ListVideosHandler(video_service=service)
        result = await handler.run(ListVideos())

        assert result.items == [video]
