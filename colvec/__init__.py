"""Typed nullable columnar arrays, logical data types and vectorized binary expressions."""

__version__ = "0.1.0"
__all__ = [
    "errors",
    "scalar",
    "array",
    "primitive_array",
    "string_array",
    "datatype",
    "functions",
    "vectorize",
    "expr",
]