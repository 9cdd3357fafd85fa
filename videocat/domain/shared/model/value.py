from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value, compared by its fields."""

    model_config = ConfigDict(frozen=True)
