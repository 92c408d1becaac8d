"""Palindrome check that ignores spaces."""


def strip_spaces(text: str) -> str:
    """Return ``text`` with every space character removed."""
    return text.replace(" ", "")


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same both ways, ignoring spaces."""
    compact = strip_spaces(text)
    return compact == compact[::-1]