"""Measure how far a stack is from being sorted."""

from __future__ import annotations

from typing import Sequence

from .stack import Stack


def stack_to_list(stack: Stack | None) -> list[int]:
    """The stack's values from top to bottom; empty for no stack."""
    if stack is None:
        return []
    return stack.values()


def count_disorder_pairs(values: Sequence[int]) -> float:
    """Fraction of ordered pairs (i < j) whose values are out of order."""
    count = len(values)
    if count < 2:
        return 0.0
    mistakes = sum(
        1
        for position, first in enumerate(values)
        for second in values[position + 1:]
        if first > second
    )
    total_pairs = count * (count - 1) // 2
    return mistakes / total_pairs


def compute_disorder(stack: Stack | None) -> float:
    """Disorder of a stack: 0.0 when sorted, 1.0 when fully reversed."""
    if stack is None or len(stack) < 2:
        return 0.0
    return count_disorder_pairs(stack_to_list(stack))