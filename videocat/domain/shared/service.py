from abc import ABCMeta
from dataclasses import dataclass
from typing import Any, dataclass_transform


@dataclass_transform()
class AutoDataclassMeta(ABCMeta):
    """Metaclass that applies @dataclass to every subclass of its root classes.

    Dependencies are declared as annotated class attributes and injected
    through the generated ``__init__``.
    """

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            return dataclass(cls)
        return cls


class Service(metaclass=AutoDataclassMeta):
    """Base class for domain services. Subclasses are automatically dataclasses."""
