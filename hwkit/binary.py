"""Conversion of binary digit strings to decimal strings."""

_MAX_DIGITS = 31


class BinaryFormatError(ValueError):
    """Raised when a binary number is malformed or too long."""


def binary_to_decimal(binary_number: str) -> str:
    """Convert a string of binary digits to its decimal representation.

    At most 31 digits are accepted; only the characters '0' and '1' are valid.
    """
    if len(binary_number) > _MAX_DIGITS:
        raise BinaryFormatError(
            f"binary number has {len(binary_number)} digits, at most {_MAX_DIGITS} allowed"
        )
    decimal = 0
    for digit in binary_number:
        if digit not in "01":
            raise BinaryFormatError(f"invalid binary digit {digit!r}")
        decimal = decimal * 2 + (digit == "1")
    return str(decimal)