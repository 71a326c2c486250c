"""Build binary expressions from a function name and the input data types."""

from __future__ import annotations

from enum import Enum

from colvec.array import Array
from colvec.datatype import DataType, TypeName
from colvec.functions import Compare, CompareOp, str_contains
from colvec.primitive_array import (
    BoolArray,
    DecimalArray,
    F32Array,
    F64Array,
    I16Array,
    I32Array,
    I64Array,
)
from colvec.string_array import StringArray
from colvec.vectorize import BinaryExpression, Expression


class ExpressionFunc(Enum):
    """The functions a binary expression can be built from."""

    CmpLe = "CmpLe"
    CmpGe = "CmpGe"
    CmpEq = "CmpEq"
    CmpNe = "CmpNe"
    StrContains = "StrContains"


_COMPARE_OPS = {
    ExpressionFunc.CmpLe: CompareOp.LE,
    ExpressionFunc.CmpGe: CompareOp.GE,
    ExpressionFunc.CmpEq: CompareOp.EQ,
    ExpressionFunc.CmpNe: CompareOp.NE,
}

_S, _I, _B = TypeName.SmallInt, TypeName.Integer, TypeName.BigInt
_R, _D = TypeName.Real, TypeName.Double
_DEC, _CHAR, _VAR = TypeName.Decimal, TypeName.Char, TypeName.Varchar

# (left type, right type) -> array type both sides are cast to before comparing
_CMP_CAST: dict[tuple[TypeName, TypeName], type[Array]] = {
    # same type
    (_S, _S): I16Array,
    (_I, _I): I32Array,
    (_B, _B): I64Array,
    (_R, _R): F32Array,
    (_D, _D): F64Array,
    (_DEC, _DEC): DecimalArray,
    (_CHAR, _CHAR): StringArray,
    (_VAR, _VAR): StringArray,
    # across integer types
    (_S, _I): I32Array,
    (_I, _S): I32Array,
    (_S, _B): I64Array,
    (_I, _B): I64Array,
    (_B, _S): I64Array,
    (_B, _I): I64Array,
    # across float types
    (_R, _D): F64Array,
    (_D, _R): F64Array,
    # integer and float32
    (_S, _R): F32Array,
    (_R, _S): F32Array,
    (_I, _R): F64Array,
    (_R, _I): F64Array,
    # integer and float64
    (_I, _D): F64Array,
    (_D, _I): F64Array,
    (_S, _D): F64Array,
    (_D, _S): F64Array,
    # integer and decimal
    (_S, _DEC): DecimalArray,
    (_DEC, _S): DecimalArray,
    (_I, _DEC): DecimalArray,
    (_DEC, _I): DecimalArray,
    (_B, _DEC): DecimalArray,
    (_DEC, _B): DecimalArray,
}


def build_binary_expression(
    f: ExpressionFunc,
    i1: DataType | None = None,
    i2: DataType | None = None,
) -> Expression:
    """Build the expression computing ``f`` over inputs of types ``i1`` and ``i2``.

    Comparisons cast both sides to a common type chosen from the input types;
    when the types are left out they are taken to be ``Integer``. String
    containment always works on strings. Combinations that have no comparison
    raise ValueError.
    """
    func = ExpressionFunc(f)
    if func is ExpressionFunc.StrContains:
        return BinaryExpression(StringArray, StringArray, BoolArray, str_contains)

    left = DataType.INTEGER if i1 is None else i1
    right = DataType.INTEGER if i2 is None else i2
    cast = _CMP_CAST.get((left.name, right.name))
    if cast is None:
        raise ValueError(
            f"unsupported comparison: {left} <{func.value}> {right}"
        )
    return BinaryExpression(
        left.array_type(),
        right.array_type(),
        BoolArray,
        Compare(_COMPARE_OPS[func], cast),
    )