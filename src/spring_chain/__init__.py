# MIT License (see LICENSE)
"""
spring_chain - An interactive 2D mass-spring chain.

A single chain of point masses hangs from a pinned anchor under gravity,
joined by springs with a live-tunable stiffness and rest length. Nodes can
be dragged and thrown with the pointer, or pinned in place.

Main entry points:
    - Simulation: Parameters, chain and pointer controller with a frame step.
    - SimParameters: The live-tunable scalars.
    - Chain: The nodes, pinned set and dragged index.
    - Vector, Node: Value types.

Submodules:
    - core: Spring forces and the semi-implicit Euler step.
    - interaction: Pointer picking, pinning, dragging and flicking.
    - io: JSON presets and chain snapshots.
    - renderer: Drawing adapters (text, buffered, pygame).

Example:
    from spring_chain import Simulation

    sim = Simulation()
    for _ in range(600):
        sim.step(16)
    print(sim.positions())
"""
from .scene import Simulation
from .params import SimParameters
from .chain import Chain
from .types import Node
from .vector import Vector

__all__ = [
    # Simulation
    "Simulation",
    "SimParameters",
    # Model
    "Chain",
    "Node",
    "Vector",
]
