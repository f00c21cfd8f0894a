import numpy as np
import pytest

from spring_chain.chain import Chain
from spring_chain.core.forces import spring_force, net_force
from spring_chain.core.integrators import advance, clamp_dt
from spring_chain.core.invariants import max_speed, kinetic_energy
from spring_chain.params import SimParameters
from spring_chain.vector import Vector


def _expected_dv(force_y: float, mass: float, dt: float, p: SimParameters) -> float:
    """Velocity after one step from rest: (F / dampen / m / fps * dt) * friction."""
    return (force_y / p.force_dampen / mass / p.fps * dt) * p.friction


def test_spring_force_is_zero_at_rest_length():
    f = spring_force(Vector(0.0, 80.0), Vector(0.0, 0.0), k=4.0, rest_length=80.0)
    assert f == Vector(0.0, 0.0)
    f = spring_force(Vector(3.0, 90.0), Vector(0.0, 0.0), k=2.0, rest_length=80.0)
    assert f == Vector(6.0, 20.0)


def test_weight_enters_once_per_node():
    """Terminal and interior nodes each get exactly m*g added."""
    params = SimParameters(spring_constant=4.0, rest_length=80.0, gravity=9.8)
    positions = [Vector(0.0, 0.0), Vector(0.0, 80.0), Vector(0.0, 160.0)]
    for i in (1, 2):
        f = net_force(positions, i, 0.5, params)
        assert f.x == 0.0
        assert f.y == pytest.approx(0.5 * 9.8)


def test_three_node_scenario():
    """
    3 nodes, m=0.5, k=4, L=80, g=9.8, spacing 120, anchor pinned, one 16ms step.

    Node 1 sits between two equally stretched springs, so only its weight
    acts and it starts moving down. Node 2 has only the stretched spring
    above it and is pulled up. Node 0 does not move.
    """
    params = SimParameters(spring_constant=4.0, rest_length=80.0, gravity=9.8)
    chain = Chain(origin=(0.0, 0.0), count=3, mass=0.5, gap=120.0)

    assert advance(chain, params, 16) is True

    v = chain.velocities()
    p = chain.positions()
    print("scenario velocities", v)

    assert np.array_equal(v[0], [0.0, 0.0])
    assert np.array_equal(p[0], [0.0, 0.0])

    v1 = _expected_dv(0.5 * 9.8, 0.5, 16, params)
    v2 = _expected_dv(-4.0 * 40.0 + 0.5 * 9.8, 0.5, 16, params)
    assert v[1, 1] == pytest.approx(v1)
    assert v[1, 1] > 0.0
    assert v[2, 1] == pytest.approx(v2)
    assert v[2, 1] != 0.0
    assert np.allclose(v[:, 0], 0.0)

    # Positions move by the new velocity, once
    assert p[1, 1] == pytest.approx(120.0 + v1)
    assert p[2, 1] == pytest.approx(240.0 + v2)


def test_dt_is_clamped():
    """A 10 s frame produces exactly the same step as a 17 ms frame."""
    params = SimParameters()
    a = Chain(count=6)
    b = Chain(count=6)

    advance(a, params, 10_000)
    advance(b, params, 17)

    assert np.array_equal(a.velocities(), b.velocities())
    assert np.array_equal(a.positions(), b.positions())


def test_clamp_dt_bounds():
    assert clamp_dt(-5.0, 17.0) == 0.0
    assert clamp_dt(16.0, 17.0) == 16.0
    assert clamp_dt(1e9, 17.0) == 17.0
    assert clamp_dt(float("nan"), 17.0) == 0.0


def test_zero_dt_leaves_chain_at_rest():
    chain = Chain(count=4)
    before = chain.positions()
    advance(chain, SimParameters(), -30)
    assert np.array_equal(chain.positions(), before)
    assert np.all(chain.velocities() == 0.0)


def test_single_free_node_only_falls():
    """A one-node chain has no springs; with the anchor released only gravity acts."""
    params = SimParameters()
    chain = Chain(origin=(0.0, 0.0), count=1, mass=0.5, anchor_locked=False)
    chain.unpin(0)

    advance(chain, params, 16)

    expected = _expected_dv(0.5 * params.gravity, 0.5, 16, params)
    assert chain[0].velocity.x == 0.0
    assert chain[0].velocity.y == pytest.approx(expected)


def test_pinned_nodes_never_move():
    params = SimParameters()
    chain = Chain(count=10)
    for _ in range(20):
        advance(chain, params, 16)

    chain.pin(5)
    held = {i: chain[i].position.clone() for i in chain.pinned}

    for _ in range(300):
        advance(chain, params, 16)
        for i, pos in held.items():
            assert chain[i].velocity == Vector.zero()
            assert chain[i].position == pos


def test_dragged_node_is_skipped():
    params = SimParameters()
    chain = Chain(count=5)
    chain.dragged = 2
    before = chain[2].position.clone()

    for _ in range(50):
        advance(chain, params, 16)

    assert chain[2].position == before
    assert chain[2].velocity == Vector.zero()
    assert chain[3].position != Vector(800.0, 250.0 + 3 * 160.0)


def test_chain_settles_to_equilibrium():
    """
    k=4, L=80, g=9.8, 10 nodes, anchor pinned: after 5000 frames of 16 ms
    the chain is at rest and every spring is stretched by the weight it
    carries, k * (dy - L) = (nodes below) * m * g.
    """
    params = SimParameters(spring_constant=4.0, rest_length=80.0, gravity=9.8)
    chain = Chain(count=10, mass=0.5)

    for _ in range(5000):
        advance(chain, params, 16)

    print("max speed", max_speed(chain), "KE", kinetic_energy(chain))
    assert max_speed(chain) < 1e-6

    y = chain.positions()[:, 1]
    gaps = np.diff(y)
    carried = np.arange(9, 0, -1)
    expected = 80.0 + carried * 0.5 * 9.8 / 4.0
    assert np.allclose(gaps, expected, atol=1e-4)
    assert np.allclose(chain.positions()[:, 0], 800.0)


def test_blow_up_freezes_chain():
    """A non-finite step is rolled back and the chain is stopped in place."""
    params = SimParameters(spring_constant=1e308)
    chain = Chain(count=4)
    before = chain.positions()

    assert advance(chain, params, 16) is False
    assert np.array_equal(chain.positions(), before)
    assert np.all(chain.velocities() == 0.0)
    assert np.all(np.isfinite(chain.positions()))
