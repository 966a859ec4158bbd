"""Errors raised by the fixed-size integer types."""


class LengthError(ValueError):
    """A buffer does not have the exact length of the type it is converted into."""

    expected: int
    len: int

    def __init__(self, expected: int, len: int):
        """Initialize the exception with the expected and actual byte lengths."""
        super().__init__(expected, len)
        self.expected = expected
        self.len = len

    def __str__(self) -> str:
        """Print exception string."""
        return f"invalid buffer length {self.len}, expected {self.expected} bytes"


class OutOfRangeError(ValueError):
    """An integer is not representable by the requested type."""

    value: int
    type_name: str

    def __init__(self, value: int, type_name: str):
        """Initialize the exception with the value and the name of the type."""
        super().__init__(value, type_name)
        self.value = value
        self.type_name = type_name

    def __str__(self) -> str:
        """Print exception string."""
        return f"value {self.value} is out of range for {self.type_name}"
