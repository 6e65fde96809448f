# lifostacks

Two last-in, first-out stacks that share one abstract interface:

- `ArrayStack` (in `lifostacks.arraystack`) keeps its elements in a Python list, bottom of the stack first. Its iterator can move both forwards and backwards.
- `LinkedListStack` (in `lifostacks.linkedliststack`) keeps its elements in a `collections.deque`, top of the stack first. Its iterator moves forwards only.

Both stacks accept values of any kind. Neither is thread safe. The package has no dependencies beyond the standard library.

## Installation

```
pip install lifostacks
```

## Usage

```python
from lifostacks.arraystack import ArrayStack

stack = ArrayStack()
stack.push(1)
stack.push(2)
stack.push(3)

stack.values()   # [3, 2, 1], top of the stack first
stack.peek()     # 3
stack.pop()      # 3
stack.size()     # 2
stack.empty()    # False
len(stack)       # 2
bool(stack)      # True
list(stack)      # [2, 1]
stack.clear()
```

`pop()` and `peek()` raise `IndexError` when the stack is empty.

### Stateful iterators

`iterator()` returns a cursor positioned one before the first element. Index 0 is the top of the stack.

```python
it = stack.iterator()
while it.next():
    print(it.index(), it.value())
```

- `ArrayStackIterator` offers `next`, `prev`, `begin`, `end`, `first`, `last`, `index` and `value`. `end()` moves one past the last element (the bottom of the stack), `last()` moves onto it, and `prev()` walks back towards the top.
- `LinkedListStackIterator` offers `next`, `begin`, `first`, `index` and `value`.

`next()`, `prev()`, `first()` and `last()` return `True` when the cursor ends up on an element. `value()` raises `IndexError` when the cursor is off either end. The cursor reads the stack live, so elements pushed after the iterator was made are seen.

### JSON

`to_json()` returns a JSON array as a string; `from_json(data)` replaces the stack's contents with a JSON array given as `str`, `bytes` or `bytearray`. A document that is not an array raises `ValueError`, as does malformed JSON.

```python
from lifostacks.linkedliststack import LinkedListStack

stack = LinkedListStack()
for item in ("a", "b", "c"):
    stack.push(item)

data = stack.to_json()   # '["c", "b", "a"]'
other = LinkedListStack()
other.from_json(data)
other.values()           # ['c', 'b', 'a']
```

The two stacks lay out the array differently: `ArrayStack` writes and reads it bottom of the stack first, `LinkedListStack` top of the stack first. A round trip through the same class restores the same stack.

### Text form

`str(stack)` gives the class name on one line, then the elements separated by commas, in the order each stack keeps them (bottom first for `ArrayStack`, top first for `LinkedListStack`).

### Writing code against either stack

`lifostacks.base.Stack` is the abstract base class both stacks implement. It declares `push`, `pop`, `peek`, `size`, `clear` and `values`, provides `empty`, and supports `len()`, truth testing and iteration from top to bottom.