"""Abstract interface shared by every stack in the package."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any


class Stack(ABC):
    """A last-in, first-out collection of values."""

    @abstractmethod
    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""

    @abstractmethod
    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError when empty."""

    @abstractmethod
    def peek(self) -> Any:
        """Return the top value without removing it; raise IndexError when empty."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of values on the stack."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every value from the stack."""

    @abstractmethod
    def values(self) -> list[Any]:
        """Return all values, top of the stack first."""

    def empty(self) -> bool:
        """Return True when the stack holds no values."""
        return self.size() == 0

    def _within_range(self, index: int) -> bool:
        return 0 <= index < self.size()

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.empty()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values())


def _decode_array(data: str | bytes | bytearray) -> list[Any]:
    """Decode a JSON document that must hold an array."""
    decoded = json.loads(data)
    if not isinstance(decoded, list):
        raise ValueError(f"expected a JSON array, got {type(decoded).__name__}")
    return decoded


def _describe(label: str, values: Iterable[Any]) -> str:
    """Render a label line followed by the values separated by commas."""
    return label + "\n" + ", ".join(str(value) for value in values)