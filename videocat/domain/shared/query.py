"""Query and QueryHandler base classes."""

from abc import abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

from videocat.domain.shared.command import Result
from videocat.domain.shared.service import AutoDataclassMeta


class Query(BaseModel): ...


Q = TypeVar("Q", bound=Query)
R = TypeVar("R", bound=Result)


class QueryHandler(Generic[Q, R], metaclass=AutoDataclassMeta):
    """Base class for read-only handlers. Subclasses are automatically dataclasses."""

    @abstractmethod
    async def run(self, query: Q) -> R: ...
