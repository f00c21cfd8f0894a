# MIT License (see LICENSE)
"""
The simulation container and frame loop.

Simulation ties the pieces together:
- SimParameters, the live-tunable scalars.
- Chain, the nodes plus pinned set and drag slot.
- InteractionController, which applies pointer events to the chain.

Each frame the integrator reads the parameters and the chain, moves every
free node, and the renderer is then handed the updated chain. Pointer events
and parameter updates are applied between frames on the same thread; nothing
here is safe to call concurrently with step().

Structure:
    - User creates a Simulation.
    - A frame callback calls tick() (wall clock) or step(dt_ms) (explicit dt).
    - UI controls call the set_* methods and reset().
"""
from __future__ import annotations
from contextlib import nullcontext
from dataclasses import dataclass, field
import logging
import time

import numpy as np

from .chain import Chain
from .core.integrators import advance, clamp_dt
from .interaction import InteractionController
from .io.json_io import chain_from_json, chain_to_json
from .params import SimParameters
from .profiler import Profiler
from .types import Node
from .vector import Vector

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """
    A spring chain with its parameters and pointer controller.

    Attributes:
        params: Parameters read every step.
        chain: The chain. Built from params.node_count when omitted.
        profiler: Optional Profiler timing the step phases.
        frame: Number of steps taken.
        time_ms: Sum of the clamped dt of every step.
        frozen: True after a step had to be rolled back.
    """
    params: SimParameters = field(default_factory=SimParameters)
    chain: Chain | None = None
    profiler: Profiler | None = None

    frame: int = 0
    time_ms: float = 0.0
    frozen: bool = False

    def __post_init__(self) -> None:
        if self.chain is None:
            self.chain = Chain(count=self.params.node_count)
        else:
            self.params.node_count = len(self.chain)
        self.controller = InteractionController(self.chain, self.params)
        self._last_tick_ms: float | None = None

    @property
    def nodes(self) -> list[Node]:
        return self.chain.nodes

    def _section(self, name: str):
        return self.profiler.section(name) if self.profiler else nullcontext()

    # --- frame loop ------------------------------------------------------

    def step(self, dt_ms: float) -> bool:
        """
        Advance the chain by one frame of dt_ms milliseconds.

        dt_ms is clamped to [0, params.max_dt_ms]. Returns False if the step
        produced a non-finite state and the chain was frozen instead.
        """
        with self._section("integrate"):
            ok = advance(self.chain, self.params, dt_ms)
        if not ok:
            self.frozen = True
        self.frame += 1
        self.time_ms += clamp_dt(dt_ms, self.params.max_dt_ms)
        return ok

    def tick(self, now_ms: float | None = None) -> bool:
        """
        Frame callback: step by the wall-clock time since the previous tick.

        Args:
            now_ms: Current time in milliseconds. Read from a monotonic clock
                    when omitted. The first tick steps with dt = 0.
        """
        if now_ms is None:
            now_ms = time.perf_counter() * 1e3
        dt_ms = 0.0 if self._last_tick_ms is None else now_ms - self._last_tick_ms
        self._last_tick_ms = now_ms
        return self.step(dt_ms)

    def render(self, renderer) -> None:
        """Hand the current chain to a RendererAdapter."""
        with self._section("render"):
            renderer.render_chain(self)

    # --- parameter controls ----------------------------------------------

    def set_spring_constant(self, value) -> bool:
        return self.params.set_spring_constant(value)

    def set_rest_length(self, value) -> bool:
        return self.params.set_rest_length(value)

    def set_gravity(self, value) -> bool:
        return self.params.set_gravity(value)

    def set_friction(self, value) -> bool:
        return self.params.set_friction(value)

    def set_node_count(self, value) -> bool:
        """
        Change the chain length, growing from the last node or truncating.

        A count that would drop the anchor node is rejected like any other
        invalid input.
        """
        previous = self.params.node_count
        if not self.params.set_node_count(value):
            return False
        if self.params.node_count <= self.chain.anchor_index:
            logger.warning("Ignoring node count %d: anchor is node %d",
                           self.params.node_count, self.chain.anchor_index)
            self.params.node_count = previous
            return False
        self.chain.resize(self.params.node_count)
        return True

    def reset(self) -> None:
        """Rebuild the default chain, pin the anchor and end any drag."""
        self.chain.reset()
        self.params.node_count = len(self.chain)
        self.frozen = False
        logger.debug("Simulation reset")

    def snapshot(self) -> dict:
        """Record the live chain state (see io.json_io.chain_to_json)."""
        return chain_to_json(self.chain)

    def restore(self, snapshot: dict) -> None:
        """
        Restore a chain snapshot and resync params.node_count to its length.

        Raises:
            ValueError: If the snapshot is empty, pins an index past its end
                        or does not contain the locked anchor.
        """
        chain_from_json(self.chain, snapshot)
        self.params.node_count = len(self.chain)
        self.frozen = False
        logger.debug("Restored %d-node snapshot", len(self.chain))

    # --- pointer input ---------------------------------------------------

    def set_pin_modifier(self, pressed: bool) -> None:
        self.controller.set_pin_modifier(pressed)

    def pointer_down(self, pos: Vector | tuple[float, float], pin_modifier: bool | None = None) -> int | None:
        return self.controller.pointer_down(pos, pin_modifier)

    def pointer_move(self, pos: Vector | tuple[float, float]) -> None:
        self.controller.pointer_move(pos)

    def pointer_up(self, pos: Vector | tuple[float, float]) -> int | None:
        return self.controller.pointer_up(pos)

    # --- inspection ------------------------------------------------------

    def positions(self) -> np.ndarray:
        return self.chain.positions()

    def velocities(self) -> np.ndarray:
        return self.chain.velocities()
