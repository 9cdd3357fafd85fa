from pydantic import BaseModel


class Aggregate(BaseModel):
    """Mutable entity with an identity, owned by a repository."""
