# MIT License (see LICENSE)
"""
Force model for the spring chain.

Every node feels at most two springs (to its neighbours above and below) and
its own weight. With y growing downward on the canvas, the force on node i is

    F_below = k * (p[i+1] - p[i] - (0, L))     (zero for the last node)
    F_above = k * (p[i]   - p[i-1] - (0, L))   (zero for node 0)
    F       = F_below - F_above + (0, m * g)

The weight enters exactly once per node, including the last one. Springs only
act along the vertical rest offset (0, L); there is no direction-dependent
rest length, which is what lets the chain hang straight at rest.

All functions take an explicit `positions` snapshot so that the integrator can
evaluate every node against the same pre-step state.
"""
from __future__ import annotations
from collections.abc import Sequence

from ..params import SimParameters
from ..vector import Vector


def spring_force(lower: Vector, upper: Vector, k: float, rest_length: float) -> Vector:
    """
    Force exerted by the spring joining `upper` to the node `lower` below it.

    Implements k * (lower - upper - (0, rest_length)).
    """
    return Vector(k * (lower.x - upper.x), k * (lower.y - upper.y - rest_length))


def force_below(positions: Sequence[Vector], index: int, params: SimParameters) -> Vector:
    """Spring force from the node below `index`, or zero for the last node."""
    if index < len(positions) - 1:
        return spring_force(positions[index + 1], positions[index],
                            params.spring_constant, params.rest_length)
    return Vector.zero()


def force_above(positions: Sequence[Vector], index: int, params: SimParameters) -> Vector:
    """Spring force against the node above `index`, or zero for node 0."""
    if index > 0:
        return spring_force(positions[index], positions[index - 1],
                            params.spring_constant, params.rest_length)
    return Vector.zero()


def net_force(
    positions: Sequence[Vector],
    index: int,
    mass: float,
    params: SimParameters,
) -> Vector:
    """
    Total force on node `index`: F_below - F_above plus its weight m * g.

    Args:
        positions: Snapshot of every node position, top first.
        index: Node to evaluate.
        mass: Mass of that node.
        params: Spring constant, rest length and gravity.
    """
    force = force_below(positions, index, params) - force_above(positions, index, params)
    force.y += mass * params.gravity
    return force
