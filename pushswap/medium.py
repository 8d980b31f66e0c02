"""Chunk-based sort for medium-sized stacks."""

from __future__ import annotations

from .operations import Machine


def _rotate_to_top_b(machine: Machine, position: int) -> None:
    size = len(machine.b)
    if position <= size // 2:
        for _ in range(position):
            machine.rb()
    else:
        for _ in range(size - position):
            machine.rrb()


def push_back_to_a(machine: Machine) -> None:
    """Return every node from b to a, highest rank first."""
    while machine.b:
        indexes = machine.b.indexes()
        _rotate_to_top_b(machine, indexes.index(max(indexes)))
        machine.pa()


def _has_index_in_range(machine: Machine, low: int, high: int) -> bool:
    return any(low <= node.index <= high for node in machine.a)


def _push_chunk_to_b(machine: Machine, low: int, high: int) -> None:
    mid = (low + high) // 2
    while _has_index_in_range(machine, low, high):
        top = machine.a.top
        if low <= top.index <= high:
            machine.pb()
            if machine.b.top.index < mid:
                machine.rb()
        else:
            machine.ra()


def _process_chunk(machine: Machine, chunk: int, chunk_count: int) -> None:
    size = len(machine.a)
    chunk_size = size // chunk_count
    low = chunk * chunk_size
    if chunk == chunk_count - 1:
        high = size - 1
    else:
        high = (chunk + 1) * chunk_size - 1
    _push_chunk_to_b(machine, low, high)


def medium_alg(machine: Machine) -> None:
    """Push ranked chunks of a onto b, then return them largest first.

    Nodes of a must already carry their indexes. Stacks of five or fewer
    elements are left untouched.
    """
    size = len(machine.a)
    if size <= 5:
        return
    chunk_count = 5 if size <= 100 else 11
    for chunk in range(chunk_count):
        _process_chunk(machine, chunk, chunk_count)
    push_back_to_a(machine)