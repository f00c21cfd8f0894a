import numpy as np

from spring_chain.chain import Chain
from spring_chain.core.integrators import advance
from spring_chain.interaction import InteractionController, IDLE, DRAGGING
from spring_chain.params import SimParameters
from spring_chain.vector import Vector


def _setup(count: int = 6, anchor_locked: bool = True):
    params = SimParameters()
    chain = Chain(origin=(0.0, 0.0), count=count, gap=100.0, anchor_locked=anchor_locked)
    return chain, params, InteractionController(chain, params)


def test_press_grabs_nearest_node():
    chain, params, ctl = _setup()
    chain[3].velocity = Vector(5.0, 5.0)

    assert ctl.pointer_down((10.0, 290.0)) == 3
    assert ctl.state == DRAGGING
    assert chain.dragged == 3
    assert chain[3].velocity == Vector.zero()


def test_drag_follows_pointer_delta():
    """The dragged node moves by the sum of pointer deltas, not to the pointer."""
    chain, params, ctl = _setup()
    start = chain[2].position.clone()
    grab = Vector(7.0, 205.0)  # off-centre grab

    ctl.pointer_down(grab)
    path = [Vector(10.0, 210.0), Vector(25.0, 190.0), Vector(40.0, 150.0)]
    for p in path:
        ctl.pointer_move(p)
        advance(chain, params, 16)
        assert chain[2].velocity == Vector.zero()

    net = path[-1] - grab
    assert chain[2].position.x == start.x + net.x
    assert chain[2].position.y == start.y + net.y


def test_release_flicks_with_twice_last_displacement():
    chain, params, ctl = _setup()
    ctl.pointer_down((0.0, 400.0))
    ctl.pointer_move((2.0, 402.0))
    ctl.pointer_move((4.0, 404.0))

    assert ctl.pointer_up((7.0, 400.0)) == 4

    assert chain[4].velocity == Vector(6.0, -8.0)
    assert chain.dragged is None
    assert ctl.state == IDLE


def test_release_without_drag_does_nothing():
    chain, params, ctl = _setup()
    before = chain.velocities()
    assert ctl.pointer_up((50.0, 50.0)) is None
    assert np.array_equal(chain.velocities(), before)


def test_move_while_idle_only_tracks_pointer():
    chain, params, ctl = _setup()
    before = chain.positions()
    ctl.pointer_move((30.0, 30.0))
    assert np.array_equal(chain.positions(), before)
    assert ctl.last_pointer == Vector(30.0, 30.0)


def test_modifier_press_toggles_pin_without_dragging():
    chain, params, ctl = _setup()
    chain[2].velocity = Vector(1.0, 1.0)

    ctl.set_pin_modifier(True)
    assert ctl.pointer_down((0.0, 200.0)) == 2
    assert chain.is_pinned(2)
    assert chain[2].velocity == Vector.zero()
    assert ctl.state == IDLE

    ctl.pointer_up((0.0, 200.0))
    assert ctl.pointer_down((0.0, 200.0)) == 2
    assert not chain.is_pinned(2)


def test_pinned_node_cannot_be_dragged():
    chain, params, ctl = _setup()
    chain.pin(3)
    assert ctl.pointer_down((0.0, 300.0)) is None
    assert ctl.state == IDLE

    ctl.pointer_move((50.0, 350.0))
    ctl.pointer_up((60.0, 360.0))
    assert chain[3].position == Vector(0.0, 300.0)
    assert chain[3].velocity == Vector.zero()


def test_locked_anchor_is_immutable():
    chain, params, ctl = _setup()
    assert ctl.pointer_down((0.0, 0.0)) is None
    assert ctl.pointer_down((0.0, 0.0), pin_modifier=True) is None
    assert chain.is_pinned(0)
    assert ctl.state == IDLE


def test_unlocked_anchor_can_be_unpinned_and_dragged():
    chain, params, ctl = _setup(anchor_locked=False)
    assert ctl.pointer_down((0.0, 0.0), pin_modifier=True) == 0
    assert not chain.is_pinned(0)

    assert ctl.pointer_down((0.0, 0.0)) == 0
    assert ctl.state == DRAGGING
    ctl.pointer_move((10.0, -5.0))
    assert chain[0].position == Vector(10.0, -5.0)


def test_press_while_dragging_is_ignored():
    chain, params, ctl = _setup()
    ctl.pointer_down((0.0, 100.0))
    assert ctl.pointer_down((0.0, 500.0)) is None
    assert chain.dragged == 1


def test_second_press_does_not_move_flick_origin():
    """A press during a drag leaves the flick measured from the last move."""
    chain, params, ctl = _setup()
    ctl.pointer_down((0.0, 300.0))
    ctl.pointer_move((1.0, 301.0))
    ctl.pointer_down((50.0, 500.0))

    assert ctl.last_pointer == Vector(1.0, 301.0)
    assert ctl.pointer_up((4.0, 305.0)) == 3
    assert chain[3].velocity == Vector(6.0, 8.0)


def test_cancel_ends_drag_without_impulse():
    chain, params, ctl = _setup()
    ctl.pointer_down((0.0, 100.0))
    ctl.pointer_move((0.0, 150.0))
    ctl.cancel()
    assert ctl.state == IDLE
    assert chain[1].velocity == Vector.zero()


def test_flick_scale_comes_from_params():
    chain, params, ctl = _setup()
    params.flick_scale = 3.0
    ctl.pointer_down((0.0, 100.0))
    ctl.pointer_up((1.0, 2.0 + 100.0))
    assert chain[1].velocity == Vector(3.0, 6.0)
