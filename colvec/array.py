"""Base classes shared by every column array and its builder."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any, ClassVar, TypeVar

from colvec.errors import TypeMismatch
from colvec.scalar import PhysicalType, Scalar

A = TypeVar("A", bound="Array")


class Array(ABC):
    """A column of values of one physical type, any of which may be null.

    Concrete arrays set ``kind`` to their physical type and
    ``builder_class`` to the builder that produces them.
    """

    kind: ClassVar[PhysicalType]
    builder_class: ClassVar[type[ArrayBuilder]]

    @abstractmethod
    def get(self, idx: int) -> Any:
        """Return the value at ``idx``, or None when that entry is null."""

    def get_scalar(self, idx: int) -> Scalar | None:
        """Return the value at ``idx`` tagged with its type, or None if null."""
        value = self.get(idx)
        if value is None:
            return None
        return Scalar(self.kind, value)

    @abstractmethod
    def __len__(self) -> int:
        """Number of entries, nulls included."""

    def __iter__(self) -> Iterator[Any]:
        for idx in range(len(self)):
            yield self.get(idx)

    @property
    def identifier(self) -> str:
        """Name of the physical type held by this array."""
        return self.kind.value

    @classmethod
    def from_slice(cls: type[A], data: Iterable[Any]) -> A:
        """Build an array of this type from values, with None for nulls."""
        builder = cls.builder_class()
        for item in data:
            builder.push(item)
        array = builder.finish()
        if not isinstance(array, cls):
            raise TypeMismatch(cls.kind.value, array.identifier)
        return array


class ArrayBuilder(ABC):
    """Collects values one at a time and turns them into an :class:`Array`."""

    array_class: ClassVar[type[Array]]

    @property
    def kind(self) -> PhysicalType:
        """Physical type of the array this builder produces."""
        return self.array_class.kind

    @property
    def identifier(self) -> str:
        """Name of the physical type this builder accepts."""
        return self.kind.value

    @abstractmethod
    def push(self, value: Any) -> None:
        """Append a plain value, or None for a null entry."""

    def push_scalar(self, value: Scalar | None) -> None:
        """Append a typed scalar, raising TypeMismatch if its type differs."""
        if value is None:
            self.push(None)
            return
        if value.kind is not self.kind:
            raise TypeMismatch(self.identifier, value.identifier)
        self.push(value.value)

    @abstractmethod
    def finish(self) -> Array:
        """Return the array holding everything pushed so far."""


def downcast(array: Array, cls: type[A]) -> A:
    """Return ``array`` as an instance of ``cls`` or raise TypeMismatch."""
    if isinstance(array, cls):
        return array
    raise TypeMismatch(cls.kind.value, array.identifier)