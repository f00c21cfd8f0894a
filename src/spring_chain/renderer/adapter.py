# MIT License (see LICENSE)
"""
Renderer adapters for the spring chain.

This module provides an abstract base class for rendering and a few concrete
implementations that need no graphics stack. The simulation itself never
draws; it hands its chain to whichever adapter the caller supplies.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..types import Node
from ..vector import Vector
from ..core.invariants import kinetic_energy, linear_momentum

if TYPE_CHECKING:
    from ..scene import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses draw springs as line segments and nodes as circles on whatever
    surface they own (a pygame window, a canvas, a text stream).

    Usage:
        renderer = MyRenderer()
        renderer.render_chain(sim)
    """

    @abstractmethod
    def begin_frame(self, frame: int, time_ms: float) -> None:
        """
        Begin a new frame.

        Args:
            frame: Number of steps taken so far.
            time_ms: Simulated time in milliseconds.
        """
        ...

    @abstractmethod
    def draw_spring(self, a: Vector, b: Vector) -> None:
        """Draw the spring between two consecutive node positions."""
        ...

    @abstractmethod
    def draw_node(self, index: int, node: Node, pinned: bool, dragged: bool) -> None:
        """Draw a single node."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_chain(self, sim: "Simulation") -> None:
        """
        Draw every spring, then every node, of the simulation's chain.

        Args:
            sim: The simulation to render.
        """
        chain = sim.chain
        self.begin_frame(sim.frame, sim.time_ms)
        for i in range(len(chain) - 1):
            self.draw_spring(chain[i].position, chain[i + 1].position)
        for i, node in enumerate(chain):
            self.draw_node(i, node, chain.is_pinned(i), chain.dragged == i)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and headless runs.

    Writes one line per node to a stream (stdout by default).

    Output:
        === Frame 120 t=1920.0ms ===
        [0] pinned @ (800.00, 250.00) v=(0.00, 0.00)
        [1] @ (800.00, 331.24) v=(0.00, -0.37)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocities and a kinetic energy and
                     momentum line.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._sim: Simulation | None = None

    def render_chain(self, sim: "Simulation") -> None:
        self._sim = sim
        super().render_chain(sim)

    def begin_frame(self, frame: int, time_ms: float) -> None:
        self.output.write(f"=== Frame {frame} t={time_ms:.1f}ms ===\n")

    def draw_spring(self, a: Vector, b: Vector) -> None:
        pass

    def draw_node(self, index: int, node: Node, pinned: bool, dragged: bool) -> None:
        tag = " pinned" if pinned else " dragged" if dragged else ""
        pos = node.position
        line = f"[{index}]{tag} @ ({pos.x:.2f}, {pos.y:.2f})"
        if self.verbose:
            vel = node.velocity
            line += f" v=({vel.x:.2f}, {vel.y:.2f})"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        if self.verbose and self._sim is not None:
            chain = self._sim.chain
            px, py = linear_momentum(chain)
            self.output.write(f"KE={kinetic_energy(chain):.4f} p=({px:.4f}, {py:.4f})\n")
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks and tests."""

    def begin_frame(self, frame: int, time_ms: float) -> None:
        pass

    def draw_spring(self, a: Vector, b: Vector) -> None:
        pass

    def draw_node(self, index: int, node: Node, pinned: bool, dragged: bool) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records every frame as plain data.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.step(16)
            sim.render(renderer)
        last = renderer.frames[-1]
        print(last["frame"], len(last["nodes"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, frame: int, time_ms: float) -> None:
        self._current_frame = {
            "frame": frame,
            "time_ms": time_ms,
            "springs": [],
            "nodes": [],
        }

    def draw_spring(self, a: Vector, b: Vector) -> None:
        if self._current_frame is None:
            return
        self._current_frame["springs"].append((a.to_array().tolist(), b.to_array().tolist()))

    def draw_node(self, index: int, node: Node, pinned: bool, dragged: bool) -> None:
        if self._current_frame is None:
            return
        self._current_frame["nodes"].append({
            "index": index,
            "position": node.position.to_array().tolist(),
            "velocity": node.velocity.to_array().tolist(),
            "pinned": pinned,
            "dragged": dragged,
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
