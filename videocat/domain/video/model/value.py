"""Video domain value objects."""

import re
from datetime import UTC, datetime
from enum import StrEnum
from typing import NewType

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from videocat.domain.shared.model.value import ValueObject

VideoId = NewType("VideoId", int)

# ISO 8601, millisecond precision, UTC designator: 2024-01-31T12:00:00.000Z
TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")
_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


class Resolution(StrEnum):
    P144 = "P144"
    P240 = "P240"
    P360 = "P360"
    P480 = "P480"
    P720 = "P720"
    P1080 = "P1080"
    P1440 = "P1440"
    P2160 = "P2160"


def utc_now() -> datetime:
    """Current UTC time truncated to whole milliseconds."""
    now = datetime.now(UTC)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def format_timestamp(value: datetime) -> str:
    """Render a datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    """Parse a ``YYYY-MM-DDTHH:MM:SS.mmmZ`` string.

    Raises:
        ValueError: If the string does not have that exact shape or does
            not name a real calendar instant.
    """
    if not TIMESTAMP_PATTERN.fullmatch(value):
        raise ValueError(f"Not a millisecond UTC timestamp: {value!r}")
    return datetime.strptime(value, _TIMESTAMP_FORMAT).replace(tzinfo=UTC)


class NewVideo(ValueObject):
    """Validated fields for a video that has not been stored yet."""

    title: str
    author: str
    available_resolutions: list[Resolution]
    can_be_downloaded: bool = False
    min_age_restriction: int | None = None
    publication_date: datetime | None = None  # None = createdAt + offset


class VideoPatch(ValueObject):
    """Validated partial update.

    Only fields explicitly set (``model_fields_set``) are applied; an
    explicit ``min_age_restriction=None`` clears the restriction.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    author: str | None = None
    available_resolutions: list[Resolution] | None = None
    can_be_downloaded: bool | None = None
    min_age_restriction: int | None = None
    publication_date: datetime | None = None
