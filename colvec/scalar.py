"""Single values tagged with their physical type."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from colvec.errors import TypeMismatch

_INT_BITS = {"Int16": 16, "Int32": 32, "Int64": 64}


def _describe(value: Any) -> str:
    """Name the physical type a Python value would have, or its class name."""
    try:
        return infer_scalar(value).kind.value
    except TypeError:
        return type(value).__name__


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class PhysicalType(Enum):
    """The physical representations a scalar or array can have."""

    Int16 = "Int16"
    Int32 = "Int32"
    Int64 = "Int64"
    Float32 = "Float32"
    Float64 = "Float64"
    Bool = "Bool"
    String = "String"
    Decimal = "Decimal"

    @property
    def identifier(self) -> str:
        return self.value

    def coerce(self, value: Any) -> Any:
        """Check ``value`` against this type and return it in stored form.

        Integers widen into float and decimal types; anything else of the
        wrong kind raises :class:`TypeMismatch`. Integers outside the range
        of a fixed-width integer type raise :class:`OverflowError`.
        """
        is_int = isinstance(value, int) and not isinstance(value, bool)
        name = self.value
        if name in _INT_BITS:
            if not is_int:
                raise TypeMismatch(name, _describe(value))
            bits = _INT_BITS[name]
            low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
            if not low <= value <= high:
                raise OverflowError(f"{value} does not fit in {name}")
            return value
        if self is PhysicalType.Float32 or self is PhysicalType.Float64:
            if not (is_int or isinstance(value, float)):
                raise TypeMismatch(name, _describe(value))
            as_float = float(value)
            return _to_float32(as_float) if self is PhysicalType.Float32 else as_float
        if self is PhysicalType.Bool:
            if not isinstance(value, bool):
                raise TypeMismatch(name, _describe(value))
            return value
        if self is PhysicalType.String:
            if not isinstance(value, str):
                raise TypeMismatch(name, _describe(value))
            return value
        if not (is_int or isinstance(value, Decimal)):
            raise TypeMismatch(name, _describe(value))
        return Decimal(value)

    def default(self) -> Any:
        """The value stored in place of a null entry."""
        return _DEFAULTS[self]


_DEFAULTS = {
    PhysicalType.Int16: 0,
    PhysicalType.Int32: 0,
    PhysicalType.Int64: 0,
    PhysicalType.Float32: 0.0,
    PhysicalType.Float64: 0.0,
    PhysicalType.Bool: False,
    PhysicalType.String: "",
    PhysicalType.Decimal: Decimal(0),
}


@dataclass(frozen=True)
class Scalar:
    """A value together with the physical type it belongs to."""

    kind: PhysicalType
    value: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.kind.coerce(self.value))

    @property
    def identifier(self) -> str:
        return self.kind.value

    def unwrap(self, kind: PhysicalType) -> Any:
        """Return the plain value, raising TypeMismatch unless it is of ``kind``."""
        if self.kind is not kind:
            raise TypeMismatch(kind.value, self.kind.value)
        return self.value


def infer_scalar(value: Any) -> Scalar:
    """Wrap a plain Python value in the scalar type it most naturally has.

    Integers become Int32 when they fit and Int64 otherwise, floats become
    Float64.
    """
    if isinstance(value, Scalar):
        return value
    if isinstance(value, bool):
        return Scalar(PhysicalType.Bool, value)
    if isinstance(value, int):
        if -(1 << 31) <= value < (1 << 31):
            return Scalar(PhysicalType.Int32, value)
        return Scalar(PhysicalType.Int64, value)
    if isinstance(value, float):
        return Scalar(PhysicalType.Float64, value)
    if isinstance(value, str):
        return Scalar(PhysicalType.String, value)
    if isinstance(value, Decimal):
        return Scalar(PhysicalType.Decimal, value)
    raise TypeError(f"no scalar type for {type(value).__name__}")