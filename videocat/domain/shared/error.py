"""Error hierarchy for videocat.

Error layers:
- VideoCatError: Base class for all videocat errors
- DomainError: Business rule violations, validation failures (4xx responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""

from collections.abc import Iterable

from videocat.domain.shared.model.value import ValueObject


class FieldError(ValueObject):
    """A single violation reported against one input field."""

    message: str
    field: str


class VideoCatError(Exception):
    """Base class for all videocat errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)

    @property
    def field_errors(self) -> list[FieldError]:
        """Field errors reported to the client for this failure."""
        return []


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(VideoCatError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""

    def __init__(self, message: str, field: str = "id") -> None:
        super().__init__(message, code="NOT_FOUND")
        self.field = field

    @property
    def field_errors(self) -> list[FieldError]:
        return [FieldError(message=self.message, field=self.field)]


class ValidationError(DomainError):
    """Input validation failed on one or more fields.

    Carries every violated rule, in the order the rules were evaluated.
    """

    def __init__(self, errors: Iterable[FieldError]) -> None:
        self.errors = list(errors)
        fields = ", ".join(e.field for e in self.errors)
        super().__init__(f"Invalid fields: {fields}", code="VALIDATION_ERROR")

    @property
    def field_errors(self) -> list[FieldError]:
        return list(self.errors)
