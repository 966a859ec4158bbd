"""Errors raised while decoding hex strings."""


class HexError(ValueError):
    """Base class for all hex decoding errors."""

    pass


class InvalidCharError(HexError):
    """A character outside `[0-9a-fA-F]`, or a malformed `0x` prefix."""

    position: int
    char: str

    def __init__(self, position: int, char: str):
        """Initialize the exception with the offending character and its position."""
        super().__init__(position, char)
        self.position = position
        self.char = char

    def __str__(self) -> str:
        """Print exception string."""
        return f"invalid character {self.char!r} at position {self.position}"


class IncorrectLenError(HexError):
    """Input does not represent exactly the expected number of bytes."""

    expected: int
    len: int

    def __init__(self, expected: int, len: int):
        """Initialize the exception with the expected byte count and the digit count."""
        super().__init__(expected, len)
        self.expected = expected
        self.len = len

    def __str__(self) -> str:
        """Print exception string."""
        return (
            f"invalid length {self.len}, expected exactly {self.expected} bytes "
            f"({self.expected * 2} hex digits)"
        )


class LenTooLongError(HexError):
    """Input represents more bytes than the target buffer can hold."""

    max: int
    len: int

    def __init__(self, max: int, len: int):
        """Initialize the exception with the buffer capacity and the digit count."""
        super().__init__(max, len)
        self.max = max
        self.len = len

    def __str__(self) -> str:
        """Print exception string."""
        return (
            f"invalid length {self.len}, expected at most {self.max} bytes "
            f"({self.max * 2} hex digits)"
        )


class OddLenError(HexError):
    """Input has an odd number of hex digits and cannot map onto whole bytes."""

    len: int

    def __init__(self, len: int):
        """Initialize the exception with the digit count."""
        super().__init__(len)
        self.len = len

    def __str__(self) -> str:
        """Print exception string."""
        return f"odd number of hex digits: {self.len}"
