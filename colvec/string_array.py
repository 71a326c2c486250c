"""Arrays of variable-length strings."""

from __future__ import annotations

from collections.abc import Iterable

from colvec.array import Array, ArrayBuilder
from colvec.scalar import PhysicalType


class StringArray(Array):
    """An array of strings stored as one UTF-8 buffer plus offsets.

    Entry ``i`` occupies ``data[offsets[i]:offsets[i + 1]]``; a null entry
    has an empty range and a False bit in the bitmap.
    """

    kind = PhysicalType.String

    def __init__(
        self,
        data: bytes = b"",
        offsets: Iterable[int] = (0,),
        bitmap: Iterable[bool] = (),
    ) -> None:
        self._data = bytes(data)
        self._offsets = tuple(offsets)
        self._bitmap = tuple(bool(bit) for bit in bitmap)
        if len(self._offsets) != len(self._bitmap) + 1:
            raise ValueError("offsets must have one more entry than bitmap")

    def get(self, idx: int) -> str | None:
        if not 0 <= idx < len(self._bitmap):
            raise IndexError(f"index {idx} out of range for array of length {len(self)}")
        if not self._bitmap[idx]:
            return None
        start, end = self._offsets[idx], self._offsets[idx + 1]
        return self._data[start:end].decode("utf-8")

    def __len__(self) -> int:
        return len(self._bitmap)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringArray):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"StringArray({list(self)!r})"


class StringArrayBuilder(ArrayBuilder):
    """Builds a :class:`StringArray` one string at a time."""

    array_class = StringArray

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data = bytearray()
        self._offsets = [0]
        self._bitmap: list[bool] = []

    def push(self, value: str | None) -> None:
        if value is None:
            self._bitmap.append(False)
        else:
            self._data.extend(self.kind.coerce(value).encode("utf-8"))
            self._bitmap.append(True)
        self._offsets.append(len(self._data))

    def finish(self) -> StringArray:
        return StringArray(bytes(self._data), self._offsets, self._bitmap)


StringArray.builder_class = StringArrayBuilder