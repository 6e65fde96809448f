import json

import pytest

from lifostacks.arraystack import ArrayStack, ArrayStackIterator

TOP_FIRST = [(0, "c"), (1, "b"), (2, "a")]


def _fill(stack, values):
    for value in values:
        stack.push(value)
    return stack


def _abc():
    return _fill(ArrayStack(), "abc")


def _walk(it, step):
    seen = []
    while step():
        seen.append((it.index(), it.value()))
    return seen


def test_stack_push():
    stack = ArrayStack()
    assert stack.empty() is True
    _fill(stack, (1, 2, 3))
    assert (stack.values(), stack.empty(), stack.size(), stack.peek()) == ([3, 2, 1], False, 3, 3)


def test_stack_peek():
    stack = ArrayStack()
    with pytest.raises(IndexError):
        stack.peek()
    assert _fill(stack, (1, 2, 3)).peek() == 3


def test_stack_pop():
    stack = _fill(ArrayStack(), (1, 2, 3))
    stack.pop()
    assert stack.peek() == 2
    assert [stack.pop(), stack.pop()] == [2, 1]
    with pytest.raises(IndexError):
        stack.pop()
    assert (stack.empty(), stack.values()) == (True, [])


def test_stack_iterator_on_empty():
    it = ArrayStack().iterator()
    assert isinstance(it, ArrayStackIterator)
    assert (it.index(), it.next()) == (-1, False)


def test_stack_iterator_next():
    it = _abc().iterator()
    assert _walk(it, it.next) == TOP_FIRST


def test_stack_iterator_prev():
    it = _abc().iterator()
    _walk(it, it.next)
    assert _walk(it, it.prev) == TOP_FIRST[::-1]


def test_stack_iterator_begin():
    stack = ArrayStack()
    it = stack.iterator()
    it.begin()
    _fill(stack, "abc")
    _walk(it, it.next)
    it.begin()
    it.next()
    assert (it.index(), it.value()) == (0, "c")


def test_stack_iterator_end():
    stack = ArrayStack()
    it = stack.iterator()
    assert it.index() == -1
    it.end()
    assert it.index() == 0
    _fill(stack, "abc")
    it.end()
    assert it.index() == stack.size()
    it.prev()
    assert (it.index(), it.value()) == (stack.size() - 1, "a")


@pytest.mark.parametrize("move, position", [("first", (0, "c")), ("last", (2, "a"))])
def test_stack_iterator_first_and_last(move, position):
    stack = ArrayStack()
    it = stack.iterator()
    assert getattr(it, move)() is False
    _fill(stack, "abc")
    assert getattr(it, move)() is True
    assert (it.index(), it.value()) == position


def test_iterator_value_out_of_range_raises():
    it = _abc().iterator()
    with pytest.raises(IndexError):
        it.value()
    it.end()
    with pytest.raises(IndexError):
        it.value()


def test_iterator_does_not_move_past_ends():
    stack = _abc()
    it = stack.iterator()
    it.end()
    assert (it.next(), it.index()) == (False, stack.size())
    it.begin()
    assert (it.prev(), it.index()) == (False, -1)


def test_stack_serialization():
    stack = _abc()

    def snapshot():
        return "".join(stack.values()), stack.size()

    snapshots = [snapshot()]
    data = stack.to_json()
    snapshots.append(snapshot())
    stack.from_json(data)
    snapshots.append(snapshot())
    assert snapshots == [("cba", 3)] * 3


def test_to_json_is_bottom_first():
    assert json.loads(_abc().to_json()) == ["a", "b", "c"]


def test_from_json_accepts_bytes():
    stack = ArrayStack()
    stack.from_json(b'["a", "b", "c"]')
    assert (stack.values(), stack.peek()) == (["c", "b", "a"], "c")


def test_str():
    assert str(_fill(ArrayStack(), (1, 2, 3))) == "ArrayStack\n1, 2, 3"