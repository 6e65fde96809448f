"""Stack backed by a deque, with a forward index iterator."""

from __future__ import annotations

import json
from collections import deque
from typing import Any

from lifostacks.base import Stack, _decode_array, _describe


class LinkedListStack(Stack):
    """Stack whose elements are kept top of the stack first."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> None:
        self._items.appendleft(value)

    def pop(self) -> Any:
        value = self.peek()
        self._items.popleft()
        return value

    def peek(self) -> Any:
        return self._at(0)

    def empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def values(self) -> list[Any]:
        return list(self._items)

    def iterator(self) -> LinkedListStackIterator:
        """Return a stateful iterator positioned before the first element."""
        return LinkedListStackIterator(self)

    def to_json(self) -> str:
        """Encode the stack as a JSON array, top of the stack first."""
        return json.dumps(list(self._items))

    def from_json(self, data: str | bytes | bytearray) -> None:
        """Replace the contents with the JSON array, top of the stack first."""
        self._items = deque(_decode_array(data))

    def _at(self, index: int) -> Any:
        if not self._within_range(index):
            raise IndexError(f"stack index {index} out of range")
        return self._items[index]

    def __str__(self) -> str:
        return _describe("LinkedListStack", self._items)


class LinkedListStackIterator:
    """Stateful forward cursor over a LinkedListStack in LIFO order."""

    def __init__(self, stack: LinkedListStack) -> None:
        self._stack = stack
        self._index = -1

    def next(self) -> bool:
        """Advance; return True if the cursor now rests on an element."""
        if self._index < self._stack.size():
            self._index += 1
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

    def first(self) -> bool:
        """Move to the first element; return True if there is one."""
        self.begin()
        return self.next()