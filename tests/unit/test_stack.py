"""
Unit tests for Stack.

Setup and teardown: every test gets a fresh stack from a fixture and the
fixture empties it again afterwards.
"""

from collections.abc import Iterator

import pytest

from testing_lab.domain.stack import EmptyStackError, Stack, StackError


@pytest.fixture
def stack() -> Iterator[Stack[int]]:
    stack: Stack[int] = Stack()
    yield stack
    stack.clear()
    assert stack.size() == 0


class TestStackPush:
    def test_push_adds_item(self, stack: Stack[int]) -> None:
        stack.push(1)

        assert stack.size() == 1
        assert stack.items == [1]

    def test_push_accepts_any_type(self) -> None:
        stack: Stack[object] = Stack()
        stack.push("a")
        stack.push(None)

        assert stack.peek() is None


class TestStackPop:
    def test_pop_removes_and_returns_top(self, stack: Stack[int]) -> None:
        stack.push(1)
        stack.push(2)

        assert stack.pop() == 2
        assert stack.size() == 1
        assert stack.peek() == 1

    def test_pop_empty_raises(self, stack: Stack[int]) -> None:
        with pytest.raises(EmptyStackError, match="Stack is empty"):
            stack.pop()


class TestStackPeek:
    def test_peek_returns_top_without_removing(self, stack: Stack[int]) -> None:
        stack.push(1)
        stack.push(2)

        assert stack.peek() == 2
        assert stack.size() == 2

    def test_peek_empty_raises(self, stack: Stack[int]) -> None:
        with pytest.raises(EmptyStackError):
            stack.peek()


class TestStackState:
    def test_new_stack_is_empty(self, stack: Stack[int]) -> None:
        assert stack.is_empty() is True
        assert stack.size() == 0
        assert len(stack) == 0

    def test_not_empty_after_push(self, stack: Stack[int]) -> None:
        stack.push(1)
        assert stack.is_empty() is False

    def test_size_counts_items(self, stack: Stack[int]) -> None:
        stack.push(1)
        stack.push(2)
        assert stack.size() == 2

    def test_clear_removes_all_items(self, stack: Stack[int]) -> None:
        stack.push(1)
        stack.push(2)

        stack.clear()

        assert stack.size() == 0
        assert stack.is_empty() is True


class TestEmptyStackError:
    def test_is_stack_error_and_index_error(self) -> None:
        err = EmptyStackError()
        assert isinstance(err, StackError)
        assert isinstance(err, IndexError)
