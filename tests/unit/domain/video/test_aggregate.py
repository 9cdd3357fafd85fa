from datetime import UTC, datetime

from videocat.domain.video.model.aggregate import Video
from videocat.domain.video.model.value import (
    Resolution,
    VideoId,
    VideoPatch,
    format_timestamp,
    parse_timestamp,
)


def _make_video() -> Video:
    return Video(
        id=VideoId(1),
        title="Original",
        author="Author",
        can_be_downloaded=False,
        min_age_restriction=12,
        created_at=datetime(2024, 1, 31, 12, 0, 0, 123000, tzinfo=UTC),
        publication_date=datetime(2024, 2, 1, 12, 0, 0, 123000, tzinfo=UTC),
        available_resolutions=[Resolution.P360],
    )


class TestVideoSerialization:
    def test_camel_case_json(self):
        data = _make_video().model_dump(mode="json", by_alias=True)

        assert data == {
            "id": 1,
            "title": "Original",
            "author": "Author",
            "canBeDownloaded": False,
            "minAgeRestriction": 12,
            "createdAt": "2024-01-31T12:00:00.123Z",
            "publicationDate": "2024-02-01T12:00:00.123Z",
            "availableResolutions": ["P360"],
        }

    def test_timestamp_round_trip(self):
        assert format_timestamp(parse_timestamp("2024-02-29T23:59:59.999Z")) == (
            "2024-02-29T23:59:59.999Z"
        )


class TestVideoApply:
    def test_only_sent_fields_change(self):
        video = _make_video()

        video.apply(VideoPatch(title="Changed", can_be_downloaded=True))

        assert video.title == "Changed"
        assert video.can_be_downloaded is True
        assert video.author == "Author"
        assert video.min_age_restriction == 12
        assert video.available_resolutions == [Resolution.P360]

    def test_resolutions_are_replaced_wholesale(self):
        video = _make_video()

        video.apply(VideoPatch(available_resolutions=[Resolution.P144, Resolution.P144]))

        assert video.available_resolutions == [Resolution.P144, Resolution.P144]

    def test_explicit_null_clears_age_restriction(self):
        video = _make_video()

        video.apply(VideoPatch(min_age_restriction=None))

        assert video.min_age_restriction is None

    def test_created_at_is_not_patchable(self):
        video = _make_video()
        created_at = video.created_at

        video.apply(VideoPatch(publication_date=datetime(2030, 1, 1, tzinfo=UTC)))

        assert video.created_at == created_at
        assert video.publication_date == datetime(2030, 1, 1, tzinfo=UTC)
