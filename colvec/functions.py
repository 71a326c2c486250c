"""Scalar functions that binary expressions apply element by element."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from colvec.array import Array
from colvec.scalar import PhysicalType


class CompareOp(Enum):
    """The comparisons available between two values.

    ``LE`` holds when the left value is strictly less than the right and
    ``GE`` when it is strictly greater.
    """

    LE = "CmpLe"
    GE = "CmpGe"
    EQ = "CmpEq"
    NE = "CmpNe"


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


@dataclass(frozen=True)
class Compare:
    """Compare two values after casting both to the type ``cast``.

    ``cast`` is a physical type or an array class; its values decide how
    the two inputs are converted before they are compared.
    """

    op: CompareOp
    cast: PhysicalType

    def __post_init__(self) -> None:
        cast = self.cast
        if isinstance(cast, type) and issubclass(cast, Array):
            cast = cast.kind
        if not isinstance(cast, PhysicalType):
            raise TypeError("cast must be a PhysicalType or an Array class")
        object.__setattr__(self, "op", CompareOp(self.op))
        object.__setattr__(self, "cast", cast)

    @property
    def name(self) -> str:
        return self.op.value

    def __call__(self, a: Any, b: Any) -> bool:
        left = self.cast.coerce(a)
        right = self.cast.coerce(b)
        if self.op is CompareOp.EQ:
            return left == right
        if self.op is CompareOp.NE:
            return left != right
        if _is_nan(left) or _is_nan(right):
            raise ValueError(f"values {a!r} and {b!r} cannot be ordered")
        if self.op is CompareOp.LE:
            return left < right
        return left > right


def str_contains(a: str, b: str) -> bool:
    """Whether the string ``a`` contains ``b``."""
    return PhysicalType.String.coerce(b) in PhysicalType.String.coerce(a)