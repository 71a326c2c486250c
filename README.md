# colvec

colvec provides typed, nullable columnar arrays and vectorized binary
expressions over them. These are the building blocks of a column-oriented
query engine.

## What it provides

- **Errors** (`colvec.errors`): `TypeMismatch` is a `TypeError`. It is raised
  when a value or an array has one physical type where another was expected.
  Its `expected` and `actual` attributes hold the two type names.
- **Scalars** (`colvec.scalar`):
  - `PhysicalType` names each physical type: `Int16`, `Int32`, `Int64`,
    `Float32`, `Float64`, `Bool`, `String` and `Decimal`.
  - `PhysicalType.coerce` checks a value against the type. Integers widen into
    float and decimal types. An integer that is out of range for a
    fixed-width type raises `OverflowError`.
  - `PhysicalType.default` gives the value that is stored in a null slot.
  - `Scalar` wraps a value together with its physical type. `Scalar.unwrap`
    returns the plain value, and raises `TypeMismatch` if the type is not the
    one asked for.
  - `infer_scalar` picks a type from a plain Python value. An integer becomes
    `Int32` if it fits and `Int64` otherwise. A float becomes `Float64`.
- **Arrays** (`colvec.array`, `colvec.primitive_array`, `colvec.string_array`):
  - An array is an immutable column. You build one with the matching builder,
    or with `Array.from_slice`, using `None` for null entries.
  - Primitive arrays keep their values and a null bitmap side by side.
    `StringArray` keeps one UTF-8 buffer plus offsets.
  - The concrete array types are `I16Array`, `I32Array`, `I64Array`,
    `F32Array`, `F64Array`, `BoolArray`, `DecimalArray` and `StringArray`.
    Each one has a builder with a matching name, such as `I32ArrayBuilder`.
  - `Array.get` returns a plain value or `None`. `Array.get_scalar` returns a
    `Scalar` or `None`. Iterating over an array yields its entries.
  - `ArrayBuilder.push_scalar` accepts typed scalars.
  - `downcast` checks that a generic array is of a concrete array class. It
    raises `TypeMismatch` when the classes do not agree.
- **Logical types** (`colvec.datatype`):
  - `TypeName` lists the SQL-style types. `DataType` pairs a `TypeName` with
    its parameters.
  - The types that take no parameters are ready-made: `DataType.SMALL_INT`,
    `INTEGER`, `BIG_INT`, `VARCHAR`, `BOOLEAN`, `REAL` and `DOUBLE`.
  - `DataType.char(width)` and `DataType.decimal(scale, precision)` build the
    types that take parameters.
  - `DataType.array_type()` gives the array class that stores values of the
    type.
- **Functions** (`colvec.functions`):
  - `Compare(op, cast)` compares two values after coercing both of them to
    `cast`, which is a `PhysicalType` or an array class.
  - `CompareOp.LE` means strictly less and `CompareOp.GE` means strictly
    greater. `EQ` and `NE` are equality and inequality.
  - An ordering comparison that involves NaN raises `ValueError`.
  - `str_contains(a, b)` tests whether `a` contains `b`.
- **Expressions** (`colvec.vectorize`, `colvec.expr`):
  - `BinaryExpression` applies a two-argument function to two arrays, entry by
    entry. An entry that is null in either input gives a null output.
  - Inputs of the wrong class raise `TypeMismatch`. Inputs of different
    lengths raise `ValueError`. `eval_expr` raises `ValueError` unless it is
    given exactly two arrays.
  - `build_binary_expression(f, i1, i2)` chooses the input arrays and the
    common cast type from an `ExpressionFunc` (`CmpLe`, `CmpGe`, `CmpEq`,
    `CmpNe`, `StrContains`) and two `DataType`s.
  - If the types are left out, they are taken to be `Integer`.
  - A type pair that has no comparison raises `ValueError`.

## Example

```python
from colvec.datatype import DataType
from colvec.expr import ExpressionFunc, build_binary_expression
from colvec.primitive_array import F64Array, I16Array

expr = build_binary_expression(ExpressionFunc.CmpGe, DataType.SMALL_INT, DataType.DOUBLE)
result = expr.eval_expr([
    I16Array.from_slice([1, 2, None]),
    F64Array.from_slice([0.0, 3.0, None]),
])
print(list(result))  # [True, False, None]
```

## What it does not do

colvec is a library of in-memory building blocks. It has no query language,
no storage and no command-line tool. Its expressions cover only the
comparisons and string containment listed above.

## Running the tests

```
pip install -e .[test]
pytest
```