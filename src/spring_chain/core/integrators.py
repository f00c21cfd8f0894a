# MIT License (see LICENSE)
"""
Semi-implicit Euler stepping for the spring chain.

One step does, for every free node (not pinned, not dragged):

    a     = F / force_dampen / m / fps
    v_new = (v + a * dt) * friction
    p_new = p + v_new

Forces for all nodes are computed from a single position snapshot taken
before any velocity is written, and positions are only moved once every
velocity for the step is known.

dt is the elapsed time in milliseconds, clamped to [0, max_dt_ms]. The
division by fps makes the force act "per nominal frame"; the units are not
physical and are not meant to be.

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
import logging
import math

from ..chain import Chain
from ..constants import MAX_DT_MS
from ..params import SimParameters
from ..vector import Vector
from .forces import net_force

logger = logging.getLogger(__name__)


def clamp_dt(dt_ms: float, max_dt_ms: float = MAX_DT_MS) -> float:
    """Clamp an elapsed time into [0, max_dt_ms]. NaN maps to 0."""
    if math.isnan(dt_ms):
        return 0.0
    return max(0.0, min(float(dt_ms), max_dt_ms))


def accelerate(chain: Chain, params: SimParameters, dt_ms: float) -> None:
    """
    Update the velocity of every free node for one step.

    Positions are not touched. dt_ms is clamped before use.
    """
    dt = clamp_dt(dt_ms, params.max_dt_ms)
    snapshot = [n.position.clone() for n in chain.nodes]

    new_velocities: list[tuple[int, Vector]] = []
    for i, node in enumerate(chain.nodes):
        if not chain.is_free(i):
            continue
        force = net_force(snapshot, i, node.mass, params)
        force /= params.force_dampen
        acc = force / node.mass / params.fps
        velocity = (node.velocity + acc * dt) * params.friction
        new_velocities.append((i, velocity))

    for i, velocity in new_velocities:
        chain.nodes[i].velocity = velocity


def advance(chain: Chain, params: SimParameters, dt_ms: float) -> bool:
    """
    Advance the chain by one step of dt_ms milliseconds.

    Pinned nodes and the dragged node are neither accelerated nor moved. If
    the step produces a non-finite position or velocity it is rolled back and
    the whole chain is stopped in place.

    Args:
        chain: Chain to integrate (modified in-place).
        params: Parameters read for this step.
        dt_ms: Elapsed time since the previous step, in milliseconds.

    Returns:
        True if the step was applied, False if the chain had to be frozen.
    """
    saved = [(n.position.clone(), n.velocity.clone()) for n in chain.nodes]

    accelerate(chain, params, dt_ms)
    for i, node in enumerate(chain.nodes):
        if chain.is_free(i):
            node.move(node.velocity)

    if all(n.position.is_finite() and n.velocity.is_finite() for n in chain.nodes):
        return True

    logger.warning("Non-finite chain state after step; freezing chain")
    for node, (pos, _) in zip(chain.nodes, saved):
        node.position = pos
        node.stop()
    return False
