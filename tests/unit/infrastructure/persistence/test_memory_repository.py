"""Tests for the in-memory video store."""

import asyncio
from datetime import UTC, datetime, timedelta

import pytest

from videocat.domain.video.model.value import NewVideo, Resolution, VideoId, VideoPatch
from videocat.infrastructure.persistence.memory import InMemoryVideoRepository

NOW = datetime(2024, 1, 31, 12, 0, 0, 500000, tzinfo=UTC)


def _fields(title: str = "Title", **overrides) -> NewVideo:
    return NewVideo(
        title=title,
        author="Author",
        available_resolutions=[Resolution.P480],
        **overrides,
    )


@pytest.fixture
def repo() -> InMemoryVideoRepository:
    return InMemoryVideoRepository(clock=lambda: NOW)


class TestInsert:
    @pytest.mark.asyncio
    async def test_assigns_ids_from_one(self, repo: InMemoryVideoRepository):
        first = await repo.insert(_fields("a"))
        second = await repo.insert(_fields("b"))

        assert (first.id, second.id) == (1, 2)

    @pytest.mark.asyncio
    async def test_stamps_timestamps(self, repo: InMemoryVideoRepository):
        video = await repo.insert(_fields())

        assert video.created_at == NOW
        assert video.publication_date == NOW + timedelta(hours=24)
        assert video.can_be_downloaded is False
        assert video.min_age_restriction is None

    @pytest.mark.asyncio
    async def test_explicit_publication_date_wins(self, repo: InMemoryVideoRepository):
        published = datetime(2030, 1, 1, tzinfo=UTC)

        video = await repo.insert(_fields(publication_date=published))

        assert video.publication_date == published

    @pytest.mark.asyncio
    async def test_publication_offset_is_configurable(self):
        repo = InMemoryVideoRepository(publication_offset=timedelta(hours=1), clock=lambda: NOW)

        video = await repo.insert(_fields())

        assert video.publication_date == NOW + timedelta(hours=1)

    @pytest.mark.asyncio
    async def test_concurrent_inserts_get_unique_ids(self, repo: InMemoryVideoRepository):
        videos = await asyncio.gather(*(repo.insert(_fields(str(i))) for i in range(50)))

        assert sorted(v.id for v in videos) == list(range(1, 51))


class TestLookupAndMutation:
    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, repo: InMemoryVideoRepository):
        assert await repo.get(VideoId(1)) is None

    @pytest.mark.asyncio
    async def test_update_applies_patch(self, repo: InMemoryVideoRepository):
        video = await repo.insert(_fields())

        updated = await repo.update(video.id, VideoPatch(author="Someone else"))

        assert updated is not None
        assert updated.author == "Someone else"
        assert (await repo.get(video.id)).author == "Someone else"

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, repo: InMemoryVideoRepository):
        assert await repo.update(VideoId(5), VideoPatch(title="x")) is None

    @pytest.mark.asyncio
    async def test_delete(self, repo: InMemoryVideoRepository):
        video = await repo.insert(_fields())

        assert await repo.delete(video.id) is True
        assert await repo.delete(video.id) is False
        assert await repo.get(video.id) is None

    @pytest.mark.asyncio
    async def test_list_preserves_insertion_order(self, repo: InMemoryVideoRepository):
        for title in ("c", "a", "b"):
            await repo.insert(_fields(title))

        assert [v.title for v in await repo.list_all()] == ["c", "a", "b"]

    @pytest.mark.asyncio
    async def test_list_is_a_snapshot(self, repo: InMemoryVideoRepository):
        await repo.insert(_fields())
        snapshot = await repo.list_all()

        await repo.insert(_fields())

        assert len(snapshot) == 1
        assert await repo.count() == 2


class TestClear:
    @pytest.mark.asyncio
    async def test_clear_empties_store(self, repo: InMemoryVideoRepository):
        await repo.insert(_fields())
        await repo.insert(_fields())

        removed = await repo.clear()

        assert removed == 2
        assert await repo.list_all() == []
        assert await repo.clear() == 0

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_clear_or_delete(self, repo: InMemoryVideoRepository):
        first = await repo.insert(_fields())
        await repo.delete(first.id)
        second = await repo.insert(_fields())
        await repo.clear()
        third = await repo.insert(_fields())

        assert (first.id, second.id, third.id) == (1, 2, 3)
