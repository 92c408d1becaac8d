"""Splitting integers into three groups around two bounds."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike


@dataclass
class Partition:
    """Numbers below ``a``, within ``[a, b]`` and above ``b``, in input order."""

    less: list[int] = field(default_factory=list)
    between: list[int] = field(default_factory=list)
    greater: list[int] = field(default_factory=list)

    def __iter__(self) -> Iterator[int]:
        yield from self.less
        yield from self.between
        yield from self.greater

    def __len__(self) -> int:
        return len(self.less) + len(self.between) + len(self.greater)


def partition_numbers(numbers: Iterable[int], a: int, b: int) -> Partition:
    """Distribute ``numbers`` into the groups ``< a``, ``a..b`` and ``> b``."""
    result = Partition()
    for number in numbers:
        if number < a:
            result.less.append(number)
        if a <= number <= b:
            result.between.append(number)
        if number > b:
            result.greater.append(number)
    return result


def _read_integers(text: str) -> Iterator[int]:
    """Yield whitespace-separated integers, stopping at the first non-integer."""
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            return


def partition_file(path: str | PathLike[str], a: int, b: int) -> Partition:
    """Read integers from the file at ``path`` and partition them.

    Raises OSError (such as FileNotFoundError) if the file cannot be read.
    """
    with open(path, encoding="utf-8") as file:
        text = file.read()
    return partition_numbers(_read_integers(text), a, b)