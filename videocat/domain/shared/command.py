"""Command and CommandHandler base classes."""

from abc import abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

from videocat.domain.shared.service import AutoDataclassMeta


class Command(BaseModel): ...


class Result(BaseModel): ...


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Result)


class CommandHandler(Generic[C, R], metaclass=AutoDataclassMeta):
    """Base class for command handlers. Subclasses are automatically dataclasses.

    A handler performs one state change and reports it as a Result:
        class MyHandler(CommandHandler[MyCmd, MyResult]):
            video_service: VideoService

            async def run(self, cmd: MyCmd) -> MyResult: ...
    """

    @abstractmethod
    async def run(self, cmd: C) -> R: ...
