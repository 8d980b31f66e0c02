import io
import random

import pytest

from pushswap.complex import complex_alg, get_max_bits
from pushswap.operations import Machine
from pushswap.stack import Stack


def make(values):
    return Machine(a=Stack(values), output=io.StringIO())


def test_get_max_bits_zero():
    assert get_max_bits(0) == 0


@pytest.mark.parametrize("bits", range(1, 12))
def test_get_max_bits_powers(bits):
    assert get_max_bits(2**bits - 1) == bits
    assert get_max_bits(2**bits) == bits + 1


def test_get_max_bits_negative():
    with pytest.raises(ValueError):
        get_max_bits(-1)


@pytest.mark.parametrize("size", [1, 2, 3, 7, 8, 64, 100, 257])
def test_complex_sorts(size):
    values = random.Random(size).sample(range(-5000, 5000), size)
    machine = make(values)
    machine.a.create_indexes()
    complex_alg(machine)
    assert machine.a.values() == sorted(values)
    assert len(machine.b) == 0


def test_complex_empty_stack():
    machine = make([])
    complex_alg(machine)
    assert machine.operations == []


def test_complex_operation_count_per_pass():
    values = [4, 0, 3, 1, 2, 7, 6, 5]
    machine = make(values)
    machine.a.create_indexes()
    complex_alg(machine)
    pushes_to_b = machine.operations.count("pb")
    rotations = machine.operations.count("ra")
    assert pushes_to_b == machine.operations.count("pa")
    assert pushes_to_b + rotations == len(values) * get_max_bits(len(values) - 1)


def test_complex_output_matches_operations():
    machine = make([3, 1, 2, 0])
    machine.a.create_indexes()
    complex_alg(machine)
    assert machine.output.getvalue().splitlines() == machine.operations
    assert machine.a.values() == [0, 1, 2, 3]