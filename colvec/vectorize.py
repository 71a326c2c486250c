"""Turn scalar functions into expressions that work on whole arrays."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any

from colvec.array import Array, downcast


class Expression(ABC):
    """Anything that can be evaluated over a run-time list of arrays."""

    @abstractmethod
    def eval_expr(self, data: Sequence[Array]) -> Array:
        """Evaluate the expression over ``data`` and return the result array."""


class BinaryExpression(Expression):
    """Apply a two-argument scalar function to two arrays, entry by entry.

    The inputs must be instances of ``left`` and ``right``; the results are
    collected into an array of class ``output``. Where either input entry is
    null, the output entry is null and ``func`` is not called.
    """

    def __init__(
        self,
        left: type[Array],
        right: type[Array],
        output: type[Array],
        func: Callable[[Any, Any], Any],
    ) -> None:
        self.left = left
        self.right = right
        self.output = output
        self.func = func

    def eval_batch(self, i1: Array, i2: Array) -> Array:
        """Evaluate the function over two arrays of equal length."""
        left = downcast(i1, self.left)
        right = downcast(i2, self.right)
        if len(left) != len(right):
            raise ValueError(
                f"array length mismatch: {len(left)} and {len(right)}"
            )
        builder = self.output.builder_class(len(left))
        for a, b in zip(left, right):
            builder.push(None if a is None or b is None else self.func(a, b))
        return builder.finish()

    def eval_expr(self, data: Sequence[Array]) -> Array:
        if len(data) != 2:
            raise ValueError("Expect two inputs for BinaryExpression")
        return self.eval_batch(data[0], data[1])

    def __repr__(self) -> str:
        return (
            f"BinaryExpression({self.left.__name__}, {self.right.__name__}"
            f" -> {self.output.__name__}, {self.func!r})"
        )