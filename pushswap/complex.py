"""Binary radix sort on node indexes."""

from __future__ import annotations

from .operations import Machine


def get_max_bits(max_value: int) -> int:
    """Number of bits needed to write ``max_value``."""
    if max_value < 0:
        raise ValueError("max_value must not be negative")
    return max_value.bit_length()


def complex_alg(machine: Machine) -> None:
    """Radix sort stack a by index, one bit per pass, using b as the zero bucket.

    Nodes of a must already carry indexes 0..n-1.
    """
    a = machine.a
    if not a:
        return
    max_bits = get_max_bits(len(a) - 1)
    for bit in range(max_bits):
        for _ in range(len(a)):
            if (a.top.index >> bit) & 1 == 0:
                machine.pb()
            else:
                machine.ra()
        while machine.b:
            machine.pa()