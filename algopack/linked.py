"""Singly linked lists and the containers built on them."""

from __future__ import annotations

import bisect
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


class EmptyError(IndexError):
    """Raised when removing from or looking into an empty container."""


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    data: Any
    next: Node | None = None


def _walk(head: Node | None) -> Iterator[Any]:
    node = head
    while node is not None:
        yield node.data
        node = node.next


class LinkedList:
    """Singly linked list that grows at the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.push(value)

    def push(self, data: Any) -> None:
        """Insert ``data`` at the front."""
        self.head = Node(data, self.head)

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def __iter__(self) -> Iterator[Any]:
        return _walk(self.head)


def has_cycle(head: Node | None) -> bool:
    """Floyd's tortoise and hare: True when following ``next`` never ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next  # type: ignore[union-attr]
        if fast is slow:
            return True
    return False


class Stack:
    """Last-in, first-out stack kept as a chain of nodes."""

    def __init__(self) -> None:
        self._head: Node | None = None

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._head = Node(value, self._head)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._head is None:
            raise EmptyError("stack is empty")
        node = self._head
        self._head = node.next
        return node.data

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._head is None:
            raise EmptyError("stack is empty")
        return self._head.data

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._head)


class Queue:
    """First-in, first-out queue kept as a chain of nodes."""

    def __init__(self) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None

    def push(self, value: Any) -> None:
        """Append ``value`` at the back."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self._head is None:
            raise EmptyError("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        return node.data

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self._head is None:
            raise EmptyError("queue is empty")
        return self._head.data

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._head)


class Deque:
    """Double-ended queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        self._items.appendleft(value)

    def push_back(self, value: Any) -> None:
        """Insert ``value`` at the back."""
        self._items.append(value)

    def pop_front(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise EmptyError("deque is empty")
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the back value."""
        if not self._items:
            raise EmptyError("deque is empty")
        return self._items.pop()

    def peek_front(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise EmptyError("deque is empty")
        return self._items[0]

    def peek_back(self) -> Any:
        """Return the back value without removing it."""
        if not self._items:
            raise EmptyError("deque is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class Polynomial:
    """Polynomial as terms ordered by descending exponent; equal exponents stay separate."""

    def __init__(self, terms: Iterable[tuple[float, int]] = ()) -> None:
        self._terms: list[tuple[float, int]] = []
        for coeff, exponent in terms:
            self.add_term(coeff, exponent)

    def add_term(self, coeff: float, exponent: int) -> None:
        """Insert a term after every term whose exponent is at least ``exponent``."""
        bisect.insort_right(self._terms, (coeff, exponent), key=lambda term: -term[1])

    def terms(self) -> list[tuple[float, int]]:
        """The (coefficient, exponent) pairs in order."""
        return list(self._terms)

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial()
        left, right = self._terms, other._terms
        i = j = 0
        while i < len(left) and j < len(right):
            (c1, e1), (c2, e2) = left[i], right[j]
            if e1 == e2:
                result.add_term(c1 + c2, e1)
                i += 1
                j += 1
            elif e1 > e2:
                result.add_term(c1, e1)
                i += 1
            else:
                result.add_term(c2, e2)
                j += 1
        for coeff, exponent in left[i:] + right[j:]:
            result.add_term(coeff, exponent)
        return result

    def __str__(self) -> str:
        if not self._terms:
            return "empty list"
        return "+".join(f"({coeff:.1f}x^{int(exponent)})" for coeff, exponent in self._terms)

    def __repr__(self) -> str:
        return f"Polynomial({self._terms!r})"