"""Field validation for inbound video payloads.

Payloads are decoded into a permissive ``VideoPayload`` (every field optional
and untyped), checked by ``validate_video``, and only then converted into
typed ``NewVideo``/``VideoPatch`` values. Every rule runs; errors come back in
a fixed field order so clients see all problems at once.
"""

from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from videocat.domain.shared.error import FieldError
from videocat.domain.shared.model.value import ValueObject
from videocat.domain.video.model.value import (
    NewVideo,
    Resolution,
    VideoPatch,
    parse_timestamp,
)

RESOLUTION_TAGS = frozenset(r.value for r in Resolution)


class ValidationMode(StrEnum):
    CREATE = "create"
    UPDATE = "update"


class VideoRules(ValueObject):
    """Limits applied by ``validate_video``."""

    title_max_length: int = 40
    author_max_length: int = 20
    max_age_restriction: int = 18


class VideoPayload(BaseModel):
    """Raw video fields as sent by a client, keyed by their camelCase names."""

    model_config = ConfigDict(alias_generator=to_camel, extra="ignore", frozen=True)

    title: Any = None
    author: Any = None
    available_resolutions: Any = None
    can_be_downloaded: Any = None
    min_age_restriction: Any = None
    publication_date: Any = None

    @classmethod
    def decode(cls, raw: Any) -> "VideoPayload":
        """Decode a request body; anything that is not an object decodes as empty."""
        if not isinstance(raw, Mapping):
            return cls()
        return cls.model_validate(dict(raw))

    def has(self, name: str) -> bool:
        """Whether the client sent ``name`` at all (null counts as sent)."""
        return name in self.model_fields_set

    def to_new_video(self) -> NewVideo:
        """Build creation fields. Only valid after a clean ``CREATE`` validation."""
        publication_date = (
            parse_timestamp(self.publication_date) if self.has("publication_date") else None
        )
        return NewVideo(
            title=self.title,
            author=self.author,
            available_resolutions=[Resolution(r) for r in self.available_resolutions],
            can_be_downloaded=self.can_be_downloaded if self.has("can_be_downloaded") else False,
            min_age_restriction=self.min_age_restriction,
            publication_date=publication_date,
        )

    def to_patch(self) -> VideoPatch:
        """Build a patch of the sent fields. Only valid after a clean ``UPDATE`` validation."""
        fields: dict[str, Any] = {}
        for name in self.model_fields_set:
            value = getattr(self, name)
            if name == "available_resolutions":
                value = [Resolution(r) for r in value]
            elif name == "publication_date":
                value = parse_timestamp(value)
            fields[name] = value
        return VideoPatch(**fields)


# =============================================================================
# Rules
# =============================================================================

_Rule = Callable[[VideoPayload, bool, VideoRules], list[FieldError]]


def _is_bounded_text(value: Any, max_length: int) -> bool:
    return isinstance(value, str) and 1 <= len(value) <= max_length


def _is_integer(value: Any) -> bool:
    # bool is an int subclass; JSON true/false are not integers
    return isinstance(value, int) and not isinstance(value, bool)


def _check_title(payload: VideoPayload, required: bool, rules: VideoRules) -> list[FieldError]:
    if not required and not payload.has("title"):
        return []
    if _is_bounded_text(payload.title, rules.title_max_length):
        return []
    return [
        FieldError(
            message=(
                "Title is required and must be a string with a maximum length of "
                f"{rules.title_max_length}."
            ),
            field="title",
        )
    ]


def _check_author(payload: VideoPayload, required: bool, rules: VideoRules) -> list[FieldError]:
    if not required and not payload.has("author"):
        return []
    if _is_bounded_text(payload.author, rules.author_max_length):
        return []
    return [
        FieldError(
            message=(
                "Author is required and must be a string with a maximum length of "
                f"{rules.author_max_length}."
            ),
            field="author",
        )
    ]


def _check_resolutions(
    payload: VideoPayload, required: bool, rules: VideoRules
) -> list[FieldError]:
    if not required and not payload.has("available_resolutions"):
        return []
    value = payload.available_resolutions
    if not isinstance(value, list) or not value:
        return [
            FieldError(
                message="At least one resolution must be provided and it must be an array.",
                field="availableResolutions",
            )
        ]
    invalid = [item for item in value if not isinstance(item, str) or item not in RESOLUTION_TAGS]
    if invalid:
        return [
            FieldError(
                message=f"Invalid resolutions: {', '.join(str(item) for item in invalid)}",
                field="availableResolutions",
            )
        ]
    return []


def _check_can_be_downloaded(
    payload: VideoPayload, required: bool, rules: VideoRules
) -> list[FieldError]:
    if not payload.has("can_be_downloaded") or isinstance(payload.can_be_downloaded, bool):
        return []
    return [FieldError(message="CanBeDownloaded must be a boolean.", field="canBeDownloaded")]


def _check_min_age_restriction(
    payload: VideoPayload, required: bool, rules: VideoRules
) -> list[FieldError]:
    value = payload.min_age_restriction
    if value is None:
        return []
    if _is_integer(value) and 0 <= value <= rules.max_age_restriction:
        return []
    return [
        FieldError(
            message=(
                "minAgeRestriction must be null or an integer between 0 and "
                f"{rules.max_age_restriction}."
            ),
            field="minAgeRestriction",
        )
    ]


def _check_publication_date(
    payload: VideoPayload, required: bool, rules: VideoRules
) -> list[FieldError]:
    if not payload.has("publication_date"):
        return []
    value = payload.publication_date
    if isinstance(value, str):
        try:
            parse_timestamp(value)
            return []
        except ValueError:
            pass
    return [
        FieldError(
            message="publicationDate must be a date-time string like 2024-01-31T12:00:00.000Z.",
            field="publicationDate",
        )
    ]


# Canonical field order of reported errors
_RULES: tuple[_Rule, ...] = (
    _check_title,
    _check_author,
    _check_resolutions,
    _check_can_be_downloaded,
    _check_min_age_restriction,
    _check_publication_date,
)


def validate_video(
    payload: VideoPayload,
    mode: ValidationMode,
    rules: VideoRules = VideoRules(),
) -> list[FieldError]:
    """Check a decoded payload against every video field rule.

    In ``CREATE`` mode title, author and availableResolutions are required;
    in ``UPDATE`` mode they are checked only when sent. The remaining fields
    are always optional.

    Returns:
        Field errors in canonical field order; empty when the payload is valid.
    """
    required = mode is ValidationMode.CREATE
    errors: list[FieldError] = []
    for rule in _RULES:
        errors.extend(rule(payload, required, rules))
    return errors
