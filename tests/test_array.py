from decimal import Decimal

import pytest

from colvec.array import Array, ArrayBuilder, downcast
from colvec.errors import TypeMismatch
from colvec.scalar import PhysicalType, Scalar


class _ListArray(Array):
    def __init__(self, values):
        self._values = list(values)

    def get(self, idx):
        return self._values[idx]

    def __len__(self):
        return len(self._values)


class _ListBuilder(ArrayBuilder):
    def __init__(self):
        self._values = []

    def push(self, value):
        self._values.append(None if value is None else self.kind.coerce(value))

    def finish(self):
        return self.array_class(self._values)


class _Int32Array(_ListArray):
    kind = PhysicalType.Int32


class _Int32Builder(_ListBuilder):
    array_class = _Int32Array


_Int32Array.builder_class = _Int32Builder


class _StrArray(_ListArray):
    kind = PhysicalType.String


class _StrBuilder(_ListBuilder):
    array_class = _StrArray


_StrArray.builder_class = _StrBuilder


def _add_i32(i1: Array, i2: Array) -> Array:
    left = downcast(i1, _Int32Array)
    right = downcast(i2, _Int32Array)
    builder = _Int32Builder()
    for a, b in zip(left, right):
        builder.push(None if a is None or b is None else a + b)
    return builder.finish()


def test_build_int32_array():
    data = [1, 2, 3, None, 5]
    array = downcast(_Int32Array.from_slice(data), _Int32Array)
    assert list(array) == data
    assert len(array) == 5


def test_build_string_array():
    data = ["1", "2", "3", None, "5", ""]
    array = downcast(_StrArray.from_slice(data), _StrArray)
    assert list(array) == data


def test_add_array():
    result = _add_i32(
        _Int32Array.from_slice([1, 2, 3, None]),
        _Int32Array.from_slice([1, 2, None, 4]),
    )
    assert list(downcast(result, _Int32Array)) == [2, 4, None, None]


def test_add_array_type_mismatch():
    with pytest.raises(TypeMismatch) as info:
        _add_i32(
            _StrArray.from_slice(["1", "2", "3", None]),
            _Int32Array.from_slice([1, 2, None, 4]),
        )
    assert info.value.expected == "Int32"
    assert info.value.actual == "String"


def test_get_scalar_tags_value_and_keeps_null():
    array = _Int32Array.from_slice([7, None])
    assert array.get_scalar(0) == Scalar(PhysicalType.Int32, 7)
    assert array.get_scalar(1) is None


def test_push_scalar_accepts_matching_kind():
    builder = _StrBuilder()
    builder.push_scalar(Scalar(PhysicalType.String, "x"))
    builder.push_scalar(None)
    assert list(builder.finish()) == ["x", None]


def test_push_scalar_rejects_other_kind():
    builder = _Int32Builder()
    with pytest.raises(TypeMismatch) as info:
        builder.push_scalar(Scalar(PhysicalType.Decimal, Decimal("1.5")))
    assert info.value.expected == "Int32"
    assert info.value.actual == "Decimal"


def test_identifier_and_empty_array():
    array = downcast(_StrArray.from_slice([]), _StrArray)
    assert array.identifier == "String"
    assert _Int32Builder().identifier == "Int32"
    assert len(array) == 0
    assert list(array) == []


def test_downcast_returns_same_object():
    array = _Int32Array.from_slice([1])
    assert downcast(array, _Int32Array) is array


def test_from_slice_rejects_wrong_values():
    with pytest.raises(TypeMismatch):
        downcast(_Int32Array.from_slice(["a"]), _Int32Array)