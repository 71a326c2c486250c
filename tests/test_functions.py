from decimal import Decimal

import pytest

from colvec.errors import TypeMismatch
from colvec.functions import Compare, CompareOp, str_contains
from colvec.primitive_array import DecimalArray, F32Array, F64Array, I32Array, I64Array
from colvec.scalar import PhysicalType
from colvec.string_array import StringArray


def test_cmp_le_cast_to_i64():
    cmp = Compare(CompareOp.LE, I64Array)
    assert cmp(0, 1) is True
    assert cmp(1, 0) is False


def test_cmp_le_is_strict():
    cmp = Compare(CompareOp.LE, I32Array)
    assert cmp(1, 1) is False


def test_cmp_ge_strings():
    cmp = Compare(CompareOp.GE, StringArray)
    assert cmp("0", "1") is False
    assert cmp("1", "0") is True


def test_cmp_ge_int_against_double():
    cmp = Compare(CompareOp.GE, F64Array)
    assert cmp(1, 0.0) is True
    assert cmp(2, 3.0) is False


def test_eq_and_ne_are_opposites():
    eq = Compare(CompareOp.EQ, I64Array)
    ne = Compare(CompareOp.NE, I64Array)
    for a, b in [(1, 1), (1, 2), (-5, 5)]:
        assert eq(a, b) is not ne(a, b)


def test_eq_float32_cast():
    cmp = Compare(CompareOp.EQ, F32Array)
    assert cmp(0.1, 0.1) is True


def test_decimal_compare_with_int():
    cmp = Compare(CompareOp.EQ, DecimalArray)
    assert cmp(Decimal(3), 3) is True
    assert Compare(CompareOp.LE, DecimalArray)(2, Decimal("2.5")) is True


def test_cast_accepts_physical_type():
    assert Compare(CompareOp.EQ, PhysicalType.Int64) == Compare(CompareOp.EQ, I64Array)


def test_name_follows_op():
    assert Compare(CompareOp.GE, I32Array).name == CompareOp.GE.value


def test_ordering_nan_raises():
    with pytest.raises(ValueError):
        Compare(CompareOp.LE, F64Array)(float("nan"), 1.0)


def test_equality_with_nan_is_false():
    assert Compare(CompareOp.EQ, F64Array)(float("nan"), float("nan")) is False
    assert Compare(CompareOp.NE, F64Array)(float("nan"), 1.0) is True


def test_compare_wrong_type_raises():
    with pytest.raises(TypeMismatch):
        Compare(CompareOp.LE, I32Array)("a", 1)


def test_bad_cast_rejected():
    with pytest.raises(TypeError):
        Compare(CompareOp.LE, int)


def test_str_contains():
    assert str_contains("000", "0") is True
    assert str_contains("111", "0") is False


def test_str_contains_empty_needle():
    assert str_contains("abc", "") is True


def test_str_contains_rejects_non_string():
    with pytest.raises(TypeMismatch):
        str_contains("abc", 1)