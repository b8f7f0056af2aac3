from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class StackError(Exception):
    """Base stack error."""

    pass


class EmptyStackError(StackError, IndexError):
    """Raised when reading from a stack with no items."""

    def __init__(self) -> None:
        super().__init__("Stack is empty")


class Stack(Generic[T]):
    """Last-in-first-out container over a list. No capacity bound."""

    def __init__(self) -> None:
        self.items: list[T] = []

    def push(self, item: T) -> None:
        self.items.append(item)

    def pop(self) -> T:
        if self.is_empty():
            raise EmptyStackError()
        return self.items.pop()

    def peek(self) -> T:
        if self.is_empty():
            raise EmptyStackError()
        return self.items[-1]

    def is_empty(self) -> bool:
        return len(self.items) == 0

    def size(self) -> int:
        return len(self.items)

    def clear(self) -> None:
        self.items = []

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"Stack(size={self.size()})"
