"""Video aggregate - one catalogue entry."""

from datetime import datetime

from pydantic import ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from videocat.domain.shared.model.aggregate import Aggregate
from videocat.domain.video.model.value import (
    Resolution,
    VideoId,
    VideoPatch,
    format_timestamp,
)

# Order in which patch fields are applied
PATCH_FIELDS = (
    "title",
    "author",
    "available_resolutions",
    "can_be_downloaded",
    "min_age_restriction",
    "publication_date",
)


class Video(Aggregate):
    """A catalogue entry. Serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: VideoId
    title: str
    author: str
    can_be_downloaded: bool = False
    min_age_restriction: int | None = None
    created_at: datetime
    publication_date: datetime
    available_resolutions: list[Resolution]

    @field_serializer("created_at", "publication_date")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)

    def apply(self, patch: VideoPatch) -> None:
        """Overwrite the fields present in ``patch``; id and created_at never change."""
        for name in PATCH_FIELDS:
            if name not in patch.model_fields_set:
                continue
            value = getattr(patch, name)
            if name == "available_resolutions":
                value = list(value)
            setattr(self, name, value)
