from spring_chain.vector import Vector
from spring_chain.types import Node
import numpy as np
import pytest


def test_value_operations_do_not_mutate():
    """+, -, * and / return new vectors and leave operands alone."""
    a = Vector(1.0, 2.0)
    b = Vector(3.0, -1.0)

    assert a + b == Vector(4.0, 1.0)
    assert a - b == Vector(-2.0, 3.0)
    assert a * 2 == Vector(2.0, 4.0)
    assert 2 * a == Vector(2.0, 4.0)
    assert b / 2 == Vector(1.5, -0.5)
    assert -a == Vector(-1.0, -2.0)
    assert a == Vector(1.0, 2.0)
    assert b == Vector(3.0, -1.0)


def test_in_place_operations_mutate_receiver():
    a = Vector(1.0, 2.0)
    alias = a
    a += Vector(1.0, 1.0)
    a *= 3
    assert alias is a
    assert a == Vector(6.0, 9.0)

    a.move(Vector(-6.0, -9.0))
    assert a == Vector(0.0, 0.0)

    a.set(5, 6)
    a.zero_out()
    assert a == Vector.zero()


def test_clone_is_independent():
    a = Vector(1.0, 2.0)
    c = a.clone()
    c += Vector(1.0, 1.0)
    assert a == Vector(1.0, 2.0)


def test_length_and_distance():
    assert Vector(3.0, 4.0).length() == pytest.approx(5.0)
    assert Vector(1.0, 1.0).distance_to(Vector(4.0, 5.0)) == pytest.approx(5.0)


def test_array_conversion():
    a = Vector(1.5, -2.0)
    arr = a.to_array()
    assert arr.dtype == np.float64
    assert np.array_equal(arr, [1.5, -2.0])
    assert Vector.from_array(arr) == a
    assert tuple(a) == (1.5, -2.0)


def test_nodes_never_share_vectors():
    """A Vector handed to two nodes is copied, so moving one leaves the other."""
    shared = Vector(10.0, 20.0)
    n1 = Node(shared, mass=1.0)
    n2 = Node(shared, mass=1.0)
    n1.move(Vector(1.0, 0.0))

    assert n1.position is not shared
    assert n2.position == Vector(10.0, 20.0)
    assert shared == Vector(10.0, 20.0)


@pytest.mark.parametrize("mass", [0.0, -1.0, float("nan")])
def test_node_rejects_non_positive_mass(mass):
    with pytest.raises(ValueError):
        Node((0.0, 0.0), mass=mass)
