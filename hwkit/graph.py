"""Directed graph with an adjacency matrix and reachability search."""

from __future__ import annotations

from os import PathLike

from hwkit.stack import Stack


class GraphError(Exception):
    """Raised on invalid graph operations or malformed matrix input."""


class Graph:
    """Directed graph whose vertices are identified by non-negative keys."""

    def __init__(self, initial_size: int) -> None:
        if initial_size <= 0:
            raise GraphError("initial graph size must be positive")
        self._size = initial_size
        self._matrix = [[0] * initial_size for _ in range(initial_size)]
        self._present = [False] * initial_size
        self._adjacent: list[list[int]] = [[] for _ in range(initial_size)]

    @property
    def size(self) -> int:
        """Number of vertex slots, including ones not yet added."""
        return self._size

    def _expand(self, new_size: int) -> None:
        extra = new_size - self._size
        for row in self._matrix:
            row.extend([0] * extra)
        self._matrix.extend([0] * new_size for _ in range(extra))
        self._present.extend([False] * extra)
        self._adjacent.extend([] for _ in range(extra))
        self._size = new_size

    def add_vertex(self, key: int) -> None:
        """Add a vertex with ``key``, growing the graph if needed.

        Raises GraphError if the key is negative or already taken.
        """
        if key < 0:
            raise GraphError(f"vertex key {key} is negative")
        if key + 1 > self._size:
            self._expand(key + 1)
        if self._present[key]:
            raise GraphError(f"vertex {key} already exists")
        self._present[key] = True

    def connect(self, key1: int, key2: int) -> None:
        """Add a directed edge from ``key1`` to ``key2``."""
        for key in (key1, key2):
            if not 0 <= key < self._size:
                raise GraphError(f"vertex key {key} is out of range")
            if not self._present[key]:
                raise GraphError(f"vertex {key} has not been added")
        self._matrix[key1][key2] = 1
        self._adjacent[key1].append(key2)

    def format_matrix(self) -> str:
        """Return the adjacency matrix; row ``i`` lists edges into vertex ``i``."""
        return "".join(
            "".join(f"{self._matrix[j][i]}\t" for j in range(self._size)) + "\n"
            for i in range(self._size)
        )

    def _reachable_count(self, start: int) -> int:
        visited = [False] * self._size
        count = 0
        stack = Stack()
        stack.push(start)
        while not stack.is_empty():
            current = stack.pop()
            if visited[current]:
                continue
            visited[current] = True
            count += 1
            for neighbour in self._adjacent[current]:
                stack.push(neighbour)
        return count

    def good_vertices(self) -> list[bool]:
        """For each vertex, whether every vertex is reachable from it.

        Raises GraphError if some vertex slot has not been added.
        """
        if not all(self._present):
            raise GraphError("graph has missing vertices")
        return [self._reachable_count(key) == self._size for key in range(self._size)]

    @classmethod
    def from_matrix_text(cls, text: str) -> Graph:
        """Build a graph from a size followed by a row-major matrix.

        A non-zero entry in row ``r``, column ``c`` is an edge from ``c`` to ``r``.
        Reading stops at the first token that is not an integer.
        """
        values: list[int] = []
        for token in text.split():
            try:
                values.append(int(token))
            except ValueError:
                break
        if not values:
            raise GraphError("matrix text holds no graph size")
        size, entries = values[0], values[1:]
        graph = cls(size)
        for key in range(size):
            graph.add_vertex(key)
        for index, entry in enumerate(entries):
            if entry:
                line, column = divmod(index, size)
                graph.connect(column, line)
        return graph

    @classmethod
    def from_matrix_file(cls, path: str | PathLike[str]) -> Graph:
        """Build a graph from a matrix file, as in :meth:`from_matrix_text`."""
        with open(path, encoding="utf-8") as file:
            return cls.from_matrix_text(file.read())