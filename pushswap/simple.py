"""Selection-style sort and the entry point of the simple strategy."""

from __future__ import annotations

from .operations import Machine
from .small import sort_2, sort_3, sort_4_5


def _move_min_index_to_top(machine: Machine, position: int) -> None:
    size = len(machine.a)
    if position <= size // 2:
        for _ in range(position):
            machine.ra()
    else:
        for _ in range(size - position):
            machine.rra()


def simple_alg(machine: Machine) -> None:
    """Push the lowest-ranked node to b repeatedly, then bring all back."""
    while machine.a:
        indexes = machine.a.indexes()
        _move_min_index_to_top(machine, indexes.index(min(indexes)))
        machine.pb()
    while machine.b:
        machine.pa()


def simple(machine: Machine) -> None:
    """Sort stack a: dedicated routines up to five elements, else simple_alg."""
    a = machine.a
    if len(a) <= 5:
        if a.is_sorted():
            return
        if len(a) == 2:
            sort_2(machine)
        elif len(a) == 3:
            sort_3(machine)
        else:
            sort_4_5(machine)
    else:
        a.create_indexes()
        simple_alg(machine)