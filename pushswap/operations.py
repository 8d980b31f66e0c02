"""The eleven push_swap instructions acting on a pair of stacks."""

from __future__ import annotations

import sys
from typing import TextIO

from .stack import Stack


class Machine:
    """Two stacks and the instructions that move nodes between them.

    Every instruction carried out is recorded in ``operations`` and written,
    one per line, to ``output`` (standard output by default).
    """

    def __init__(
        self,
        a: Stack | None = None,
        b: Stack | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.a = a if a is not None else Stack()
        self.b = b if b is not None else Stack()
        self.output = output
        self.operations: list[str] = []

    def _emit(self, name: str) -> None:
        self.operations.append(name)
        stream = self.output if self.output is not None else sys.stdout
        stream.write(name + "\n")

    def sa(self) -> None:
        self.a.swap()
        self._emit("sa")

    def sb(self) -> None:
        self.b.swap()
        self._emit("sb")

    def ss(self) -> None:
        self.a.swap()
        self.b.swap()
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of b onto a; does nothing when b is empty."""
        if not self.b:
            return
        self.a.push(self.b.pop())
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b; does nothing when a is empty."""
        if not self.a:
            return
        self.b.push(self.a.pop())
        self._emit("pb")

    def ra(self) -> None:
        self.a.rotate()
        self._emit("ra")

    def rb(self) -> None:
        self.b.rotate()
        self._emit("rb")

    def rr(self) -> None:
        self.a.rotate()
        self.b.rotate()
        self._emit("rr")

    def rra(self) -> None:
        self.a.reverse_rotate()
        self._emit("rra")

    def rrb(self) -> None:
        self.b.reverse_rotate()
        self._emit("rrb")

    def rrr(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._emit("rrr")