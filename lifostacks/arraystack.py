"""Stack backed by a Python list, with a bidirectional index iterator."""

from __future__ import annotations

import json
from typing import Any

from lifostacks.base import Stack, _decode_array


class ArrayStack(Stack):
    """Stack whose elements live in a list, bottom of the stack first."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def values(self) -> list[Any]:
        return self._items[::-1]

    def iterator(self) -> ArrayStackIterator:
        """Return a stateful iterator positioned before the first element."""
        return ArrayStackIterator(self)

    def to_json(self) -> str:
        """Encode the stack as a JSON array, bottom of the stack first."""
        return json.dumps(self._items)

    def from_json(self, data: str | bytes | bytearray) -> None:
        """Replace the contents with the JSON array, bottom of the stack first."""
        self._items = _decode_array(data)

    def _within_range(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def _at(self, index: int) -> Any:
        """Return the element at a LIFO position (0 is the top)."""
        if not self._within_range(index):
            raise IndexError(f"stack index {index} out of range")
        return self._items[len(self._items) - index - 1]

    def __str__(self) -> str:
        return "ArrayStack\n" + ", ".join(str(value) for value in self._items)


class ArrayStackIterator:
    """Stateful cursor over an ArrayStack in LIFO order, movable both ways."""

    def __init__(self, stack: ArrayStack) -> None:
        self._stack = stack
        self._index = -1

    def next(self) -> bool:
        """Advance; return True if the cursor now rests on an element."""
        if self._index < self._stack.size():
            self._index += 1
        return self._stack._within_range(self._index)

    def prev(self) -> bool:
        """Step back; return True if the cursor now rests on an element."""
        if self._index >= 0:
            self._index -= 1
        return self._stack._within_range(self._index)

    def value(self) -> Any:
        """Return the current element; raise IndexError when off the ends."""
        return self._stack._at(self._index)

    def index(self) -> int:
        """Return the current position, 0 being the top of the stack."""
        return self._index

    def begin(self) -> None:
        """Move to one before the first element."""
        self._index = -1

    def end(self) -> None:
        """Move to one past the last element."""
        self._index = self._stack.size()

    def first(self) -> bool:
        """Move to the first element; return True if there is one."""
        self.begin()
        return self.next()

    def last(self) -> bool:
        """Move to the last element; return True if there is one."""
        self.end()
        return self.prev()