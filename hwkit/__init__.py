"""Palindromes, binary conversion, stacks, queues, linked lists, search-tree sorting, partitioning and graph reachability."""

__version__ = "0.1.0"