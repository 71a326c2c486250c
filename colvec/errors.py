"""Errors raised by the column and scalar types."""


class TypeMismatch(TypeError):
    """A value or array held one physical type where another was expected."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(
            f"Type mismatch on conversion: expected {expected}, get {actual}"
        )
        self.expected = expected
        self.actual = actual

    def __reduce__(self):
        return (type(self), (self.expected, self.actual))