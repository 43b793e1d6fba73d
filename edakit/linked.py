"""Singly linked list, stack and queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """A list cell holding a value and the following cell."""

    value: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list of values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._size = 0
        for value in values:
            self.insert_last(value)

    def insert_first(self, value: Any) -> None:
        self._head = Node(value, self._head)
        self._size += 1

    def insert_last(self, value: Any) -> None:
        node = Node(value)
        if self._head is None:
            self._head = node
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = node
        self._size += 1

    def remove_first(self) -> None:
        """Drop the first cell; does nothing on an empty list."""
        if self._head is not None:
            self._head = self._head.next
            self._size -= 1

    def remove(self, value: Any) -> None:
        """Drop every cell holding value."""
        previous: Node | None = None
        node = self._head
        while node is not None:
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
            else:
                previous = node
            node = node.next

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def find(self, value: Any) -> Node | None:
        """First cell holding value, or None."""
        node = self._head
        while node is not None and node.value != value:
            node = node.next
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self)


class Stack:
    """Last-in first-out container."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; None when empty."""
        return self._items.pop() if self._items else None

    def top(self) -> Any:
        """Top value, or None when empty."""
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class Queue:
    """First-in first-out container."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(values)

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the front value; None when empty."""
        return self._items.popleft() if self._items else None

    def top(self) -> Any:
        """Front value, or None when empty."""
        return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)