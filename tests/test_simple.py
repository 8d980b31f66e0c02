import io
import random

import pytest

from pushswap.operations import Machine
from pushswap.simple import simple, simple_alg
from pushswap.stack import Stack


def make(values):
    return Machine(a=Stack(values), output=io.StringIO())


def replay(values, operations):
    machine = make(values)
    for name in operations:
        getattr(machine, name)()
    return machine


@pytest.mark.parametrize("seed", range(6))
@pytest.mark.parametrize("size", [2, 3, 4, 5, 6, 17, 40])
def test_simple_sorts(seed, size):
    values = random.Random(seed).sample(range(-500, 500), size)
    machine = make(values)
    simple(machine)
    assert machine.a.values() == sorted(values)
    assert len(machine.b) == 0


def test_simple_sorted_input_emits_nothing():
    machine = make([1, 2, 3, 4])
    simple(machine)
    assert machine.operations == []
    assert machine.output.getvalue() == ""


@pytest.mark.parametrize("values", [[], [42]])
def test_simple_trivial_stacks(values):
    machine = make(values)
    simple(machine)
    assert machine.a.values() == values
    assert machine.operations == []


def test_simple_large_assigns_indexes():
    values = [30, 10, 20, 60, 50, 40]
    machine = make(values)
    simple(machine)
    assert machine.a.indexes() == list(range(len(values)))


def test_simple_alg_sorts_by_index():
    values = [8, -3, 15, 0, 4, 99, 2]
    machine = make(values)
    machine.a.create_indexes()
    simple_alg(machine)
    assert machine.a.values() == sorted(values)


def test_simple_operations_replay_to_same_state():
    values = [7, 3, 9, 1, 5, 8, 2]
    machine = make(values)
    simple(machine)
    again = replay(values, machine.operations)
    assert again.a.values() == machine.a.values()
    assert machine.output.getvalue().splitlines() == machine.operations