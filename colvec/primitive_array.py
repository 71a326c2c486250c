"""Arrays of fixed-size values: integers, floats, booleans and decimals."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from colvec.array import Array, ArrayBuilder
from colvec.scalar import PhysicalType


class PrimitiveArray(Array):
    """An array of fixed-size values with a separate validity bitmap.

    ``[1, None, 2]`` is held as the values ``(1, 0, 2)`` and the bitmap
    ``(True, False, True)``; a null slot keeps the type's default value.
    """

    def __init__(self, data: Iterable[Any] = (), bitmap: Iterable[bool] = ()) -> None:
        self._data = tuple(data)
        self._bitmap = tuple(bool(bit) for bit in bitmap)
        if len(self._data) != len(self._bitmap):
            raise ValueError("data and bitmap must have the same length")

    def get(self, idx: int) -> Any:
        if not 0 <= idx < len(self._data):
            raise IndexError(f"index {idx} out of range for array of length {len(self)}")
        return self._data[idx] if self._bitmap[idx] else None

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimitiveArray):
            return NotImplemented
        return type(self) is type(other) and list(self) == list(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class PrimitiveArrayBuilder(ArrayBuilder):
    """Builds a :class:`PrimitiveArray` one value at a time."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data: list[Any] = []
        self._bitmap: list[bool] = []

    def push(self, value: Any) -> None:
        if value is None:
            self._data.append(self.kind.default())
            self._bitmap.append(False)
        else:
            self._data.append(self.kind.coerce(value))
            self._bitmap.append(True)

    def finish(self) -> PrimitiveArray:
        return self.array_class(self._data, self._bitmap)


class I16Array(PrimitiveArray):
    """Array of 16-bit signed integers."""

    kind = PhysicalType.Int16


class I32Array(PrimitiveArray):
    """Array of 32-bit signed integers."""

    kind = PhysicalType.Int32


class I64Array(PrimitiveArray):
    """Array of 64-bit signed integers."""

    kind = PhysicalType.Int64


class F32Array(PrimitiveArray):
    """Array of single-precision floats."""

    kind = PhysicalType.Float32


class F64Array(PrimitiveArray):
    """Array of double-precision floats."""

    kind = PhysicalType.Float64


class BoolArray(PrimitiveArray):
    """Array of booleans."""

    kind = PhysicalType.Bool


class DecimalArray(PrimitiveArray):
    """Array of decimal numbers."""

    kind = PhysicalType.Decimal


class I16ArrayBuilder(PrimitiveArrayBuilder):
    array_class = I16Array


class I32ArrayBuilder(PrimitiveArrayBuilder):
    array_class = I32Array


class I64ArrayBuilder(PrimitiveArrayBuilder):
    array_class = I64Array


class F32ArrayBuilder(PrimitiveArrayBuilder):
    array_class = F32Array


class F64ArrayBuilder(PrimitiveArrayBuilder):
    array_class = F64Array


class BoolArrayBuilder(PrimitiveArrayBuilder):
    array_class = BoolArray


class DecimalArrayBuilder(PrimitiveArrayBuilder):
    array_class = DecimalArray


for _array_cls, _builder_cls in (
    (I16Array, I16ArrayBuilder),
    (I32Array, I32ArrayBuilder),
    (I64Array, I64ArrayBuilder),
    (F32Array, F32ArrayBuilder),
    (F64Array, F64ArrayBuilder),
    (BoolArray, BoolArrayBuilder),
    (DecimalArray, DecimalArrayBuilder),
):
    _array_cls.builder_class = _builder_cls
del _array_cls, _builder_cls