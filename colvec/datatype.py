"""Logical data types and the physical arrays that hold them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from colvec.array import Array
from colvec.primitive_array import (
    BoolArray,
    DecimalArray,
    F32Array,
    F64Array,
    I16Array,
    I32Array,
    I64Array,
)
from colvec.scalar import PhysicalType
from colvec.string_array import StringArray

_U16_MAX = 0xFFFF


class TypeName(Enum):
    """Names of the logical types known to the system."""

    SmallInt = "SmallInt"
    Integer = "Integer"
    BigInt = "BigInt"
    Varchar = "Varchar"
    Char = "Char"
    Boolean = "Boolean"
    Real = "Real"
    Double = "Double"
    Decimal = "Decimal"


_ARRAY_TYPES: dict[TypeName, type[Array]] = {
    TypeName.SmallInt: I16Array,
    TypeName.Integer: I32Array,
    TypeName.BigInt: I64Array,
    TypeName.Varchar: StringArray,
    TypeName.Char: StringArray,
    TypeName.Boolean: BoolArray,
    TypeName.Real: F32Array,
    TypeName.Double: F64Array,
    TypeName.Decimal: DecimalArray,
}


def _check_u16(label: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{label} must be an integer")
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{label} must be between 0 and {_U16_MAX}, got {value}")


@dataclass(frozen=True)
class DataType:
    """A logical data type, with the parameters some of them carry.

    ``Char`` carries a ``width``; ``Decimal`` carries a ``scale`` and a
    ``precision``. Every other type carries none.
    """

    name: TypeName
    width: int | None = None
    scale: int | None = None
    precision: int | None = None

    SMALL_INT: ClassVar[DataType]
    INTEGER: ClassVar[DataType]
    BIG_INT: ClassVar[DataType]
    VARCHAR: ClassVar[DataType]
    BOOLEAN: ClassVar[DataType]
    REAL: ClassVar[DataType]
    DOUBLE: ClassVar[DataType]

    def __post_init__(self) -> None:
        name = TypeName(self.name)
        object.__setattr__(self, "name", name)
        if name is TypeName.Char:
            if self.width is None:
                raise ValueError("Char needs a width")
            _check_u16("width", self.width)
        elif self.width is not None:
            raise ValueError(f"{name.value} takes no width")
        if name is TypeName.Decimal:
            if self.scale is None or self.precision is None:
                raise ValueError("Decimal needs a scale and a precision")
            _check_u16("scale", self.scale)
            _check_u16("precision", self.precision)
        elif self.scale is not None or self.precision is not None:
            raise ValueError(f"{name.value} takes no scale or precision")

    @classmethod
    def char(cls, width: int) -> DataType:
        """A fixed-width character type."""
        return cls(TypeName.Char, width=width)

    @classmethod
    def decimal(cls, scale: int, precision: int) -> DataType:
        """A decimal type with the given scale and precision."""
        return cls(TypeName.Decimal, scale=scale, precision=precision)

    def array_type(self) -> type[Array]:
        """The array class that stores values of this type."""
        return _ARRAY_TYPES[self.name]

    @property
    def physical_type(self) -> PhysicalType:
        """The physical representation of values of this type."""
        return self.array_type().kind

    def __str__(self) -> str:
        if self.name is TypeName.Char:
            return f"Char {{ width: {self.width} }}"
        if self.name is TypeName.Decimal:
            return f"Decimal {{ scale: {self.scale}, precision: {self.precision} }}"
        return self.name.value


DataType.SMALL_INT = DataType(TypeName.SmallInt)
DataType.INTEGER = DataType(TypeName.Integer)
DataType.BIG_INT = DataType(TypeName.BigInt)
DataType.VARCHAR = DataType(TypeName.Varchar)
DataType.BOOLEAN = DataType(TypeName.Boolean)
DataType.REAL = DataType(TypeName.Real)
DataType.DOUBLE = DataType(TypeName.Double)