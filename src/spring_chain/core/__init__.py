# MIT License (see LICENSE)
"""
Chain physics.

This subpackage provides:
    - Forces: spring force between neighbours, net force with weight.
    - Integrators: dt clamping and the semi-implicit Euler chain step.
    - Invariants: kinetic energy, max speed, momentum.

Typical usage:
    from spring_chain.core import advance

    advance(chain, params, dt_ms=16)
"""
from .forces import spring_force, force_below, force_above, net_force
from .integrators import clamp_dt, accelerate, advance
from .invariants import kinetic_energy, max_speed, linear_momentum

__all__ = [
    # Forces
    "spring_force",
    "force_below",
    "force_above",
    "net_force",
    # Integrators
    "clamp_dt",
    "accelerate",
    "advance",
    # Invariants
    "kinetic_energy",
    "max_speed",
    "linear_momentum",
]
