"""Stack of integer nodes used by the push_swap machine."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator


class Mode(IntEnum):
    """Sorting strategy selected by a command-line flag."""

    NONE = 0
    SIMPLE = 1
    MEDIUM = 2
    COMPLEX = 3
    ADAPTIVE = 4


@dataclass
class Node:
    """One element of a stack: its value and its rank among all values."""

    value: int
    index: int = -1


class Stack:
    """A stack whose top is the first element when iterating."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(value) for value in values)
        self.mode = Mode.NONE

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    @property
    def top(self) -> Node | None:
        """The node on top, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def push_back(self, value: int) -> Node:
        """Append a new node holding ``value`` at the bottom."""
        node = Node(value)
        self._nodes.append(node)
        return node

    def has_duplicate(self, value: int) -> bool:
        """Return True when ``value`` occurs at least twice in the stack."""
        return sum(1 for node in self._nodes if node.value == value) >= 2

    def last(self) -> Node | None:
        """The node at the bottom, or None when the stack is empty."""
        return self._nodes[-1] if self._nodes else None

    def clear(self) -> None:
        """Remove every node."""
        self._nodes.clear()

    def is_sorted(self) -> bool:
        """Return True when values never decrease from top to bottom."""
        values = self.values()
        return all(first <= second for first, second in zip(values, values[1:]))

    def create_indexes(self) -> None:
        """Give every node its rank: the number of smaller values."""
        values = self.values()
        for node in self._nodes:
            node.index = sum(1 for other in values if node.value > other)

    def values(self) -> list[int]:
        """The values from top to bottom."""
        return [node.value for node in self._nodes]

    def indexes(self) -> list[int]:
        """The ranks from top to bottom."""
        return [node.index for node in self._nodes]

    def swap(self) -> None:
        """Exchange the values of the two top nodes."""
        if len(self._nodes) < 2:
            return
        first, second = self._nodes[0], self._nodes[1]
        first.value, second.value = second.value, first.value

    def rotate(self) -> None:
        """Move the top node to the bottom."""
        if len(self._nodes) < 2:
            return
        self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top."""
        if len(self._nodes) < 2:
            return
        self._nodes.rotate(1)

    def pop(self) -> Node:
        """Remove and return the top node."""
        if not self._nodes:
            raise IndexError("pop from empty stack")
        return self._nodes.popleft()

    def push(self, node: Node) -> None:
        """Place ``node`` on top."""
        self._nodes.appendleft(node)