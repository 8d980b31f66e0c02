"""Sorting stacks of two to five elements."""

from __future__ import annotations

from .operations import Machine


def sort_2(machine: Machine) -> None:
    """Sort a two-element stack a."""
    a = machine.a
    if len(a) < 2:
        return
    first, second = a.values()[:2]
    if first > second:
        machine.sa()


def _sort_3_cases(machine: Machine, x: int, y: int, z: int) -> None:
    if x > y and y < z and x < z:
        machine.sa()
    if x > y and y > z:
        machine.sa()
        machine.rra()
    if x > y and y < z and x > z:
        machine.ra()
    if x < y and y > z and x < z:
        machine.sa()
        machine.ra()
    if x < y and y > z and x > z:
        machine.rra()


def sort_3(machine: Machine) -> None:
    """Sort a three-element stack a with at most two instructions."""
    a = machine.a
    if len(a) < 3:
        return
    x, y, z = a.values()[:3]
    if x <= y <= z:
        return
    _sort_3_cases(machine, x, y, z)


def _move_to_top(machine: Machine, position: int) -> None:
    size = len(machine.a)
    if position <= size // 2:
        for _ in range(position):
            machine.ra()
    else:
        for _ in range(size - position):
            machine.rra()


def sort_4_5(machine: Machine) -> None:
    """Sort a stack a of four or five elements using b."""
    size = len(machine.a)
    if size not in (4, 5):
        raise ValueError(f"sort_4_5 needs 4 or 5 elements, got {size}")
    for _ in range(size - 3):
        values = machine.a.values()
        _move_to_top(machine, values.index(min(values)))
        machine.pb()
    sort_3(machine)
    while machine.b:
        machine.pa()