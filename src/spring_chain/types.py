# MIT License (see LICENSE)
"""
Core type definitions for the spring chain.

A Node is one point mass. The chain itself (chain.py) is an ordered list of
nodes where each pair of neighbours is joined by an implicit spring; nodes
are identified by their index in that list, with index 0 at the top.
"""
from __future__ import annotations
from dataclasses import dataclass
import math

from .vector import Vector


@dataclass
class Node:
    """
    A point mass in the chain.

    Attributes:
        position: Centre of the node in canvas coordinates (y grows downward).
        velocity: Displacement applied to position once per step.
        mass: Must be > 0; the integrator divides by it.
        radius: Drawing and picking radius, not used by the physics.

    Note:
        position and velocity are copied into fresh Vector instances on init,
        so a Vector passed in by the caller is never shared with the node.
    """
    position: Vector | tuple[float, float]
    velocity: Vector | tuple[float, float] = (0.0, 0.0)
    mass: float = 1.0
    radius: float = 6.0

    def __post_init__(self) -> None:
        self.position = Vector.of(self.position)
        self.velocity = Vector.of(self.velocity)
        self.mass = float(self.mass)
        if not math.isfinite(self.mass) or self.mass <= 0:
            raise ValueError(f"Node mass must be a positive number, got {self.mass!r}")

    def move(self, delta: Vector) -> None:
        """Translate the node in place."""
        self.position.move(delta)

    def stop(self) -> None:
        """Zero the velocity in place."""
        self.velocity.zero_out()
