"""LIFO stacks backed by a list or a deque, with index iterators and JSON support."""

__version__ = "0.1.0"