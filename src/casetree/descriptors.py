"""Descriptors for the types and methods that tests are built from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class TypeInfo:
    """Describes the class (or module) that declares a test.

    Attributes:
        namespace: Dotted module path, or "" for top-level names.
        name: Bare class name, including any qualname nesting.
        type: The live class, when the descriptor was built from one.
    """

    namespace: str
    name: str
    type: type | None = None

    @classmethod
    def from_type(cls, obj: type) -> TypeInfo:
        return cls(namespace=obj.__module__, name=obj.__qualname__, type=obj)

    @classmethod
    def parse(cls, full_name: str) -> TypeInfo:
        """Build a descriptor from a dotted name such as ``pkg.mod.Class``."""
        namespace, _, name = full_name.rpartition(".")
        return cls(namespace=namespace, name=name)

    @property
    def full_name(self) -> str:
        if not self.namespace:
            return self.name
        return f"{self.namespace}.{self.name}"


@dataclass(frozen=True)
class MethodInfo:
    """Describes a single test method on its declaring type."""

    type_info: TypeInfo
    name: str
    func: Callable[..., Any] | None = None

    @classmethod
    def from_function(cls, func: Callable[..., Any], owner: type | None = None) -> MethodInfo:
        if owner is not None:
            type_info = TypeInfo.from_type(owner)
        else:
            qualname = getattr(func, "__qualname__", func.__name__)
            owner_name = qualname.rpartition(".")[0]
            type_info = TypeInfo(namespace=func.__module__, name=owner_name)
        return cls(type_info=type_info, name=func.__name__, func=func)

    @property
    def full_name(self) -> str:
        return f"{self.type_info.full_name}.{self.name}"
