# MIT License (see LICENSE)
"""
The chain container: nodes, pinned set and drag slot.

Chain owns the ordered node list together with the two pieces of index state
that refer into it (the pinned set and the currently dragged index), so that
resizing can keep them consistent. It has no physics of its own; see
core/integrators.py for the step and interaction.py for pointer handling.

Structure:
    - Chain(...) builds `count` nodes stacked below `origin`.
    - resize(n) grows from the last node or truncates from the end.
    - reset() rebuilds from the construction arguments.
"""
from __future__ import annotations
from collections.abc import Iterator
import logging

import numpy as np

from . import constants
from .types import Node
from .vector import Vector

logger = logging.getLogger(__name__)


def generate_nodes(
    origin: Vector | tuple[float, float],
    count: int,
    mass: float,
    gap: float = constants.NODE_GAP,
    radius: float = constants.NODE_RADIUS,
) -> list[Node]:
    """
    Build `count` nodes in a vertical column below `origin`.

    Node i sits at (origin.x, origin.y + i * gap) with zero velocity.

    Raises:
        ValueError: If count < 1 or mass <= 0.
    """
    if count < 1:
        raise ValueError(f"A chain needs at least one node, got count={count}")
    ox, oy = Vector.of(origin)
    return [Node((ox, oy + i * gap), mass=mass, radius=radius) for i in range(count)]


class Chain:
    """
    Ordered sequence of nodes joined by implicit springs.

    Attributes:
        nodes: The nodes, top (anchor) first.
        pinned: Indices held fixed in space. Starts as {anchor_index}.
        dragged: Index currently driven by the pointer, or None.
        anchor_index: Index pinned on construction and reset.
        anchor_locked: If True the anchor cannot be unpinned or dragged.
    """

    def __init__(
        self,
        origin: Vector | tuple[float, float] = constants.ORIGIN,
        count: int = constants.NODE_COUNT,
        mass: float = constants.NODE_MASS,
        gap: float = constants.NODE_GAP,
        radius: float = constants.NODE_RADIUS,
        anchor_index: int = constants.ANCHOR_INDEX,
        anchor_locked: bool = True,
    ) -> None:
        self.origin = Vector.of(origin)
        self.count = int(count)
        if self.count >= 1 and not 0 <= anchor_index < self.count:
            raise ValueError(f"anchor_index must be in 0..{self.count - 1}, got {anchor_index}")
        self.mass = mass
        self.gap = gap
        self.radius = radius
        self.anchor_index = anchor_index
        self.anchor_locked = anchor_locked

        self.nodes: list[Node] = []
        self.pinned: set[int] = set()
        self.dragged: int | None = None
        self.reset()

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    # --- lifecycle -------------------------------------------------------

    def reset(self) -> None:
        """Rebuild from the construction defaults and restore the pinned anchor."""
        self.nodes = generate_nodes(self.origin, self.count, self.mass, self.gap, self.radius)
        self.pinned = {self.anchor_index}
        self.dragged = None
        logger.debug("Chain reset to %d nodes", len(self.nodes))

    def resize(self, count: int) -> None:
        """
        Grow or shrink the chain to `count` nodes.

        New nodes start at the current last node's position with zero
        velocity, so the springs pull them into place. Shrinking drops nodes
        from the end along with any pinned or dragged index past the new end.

        Raises:
            ValueError: If count < 1, or if it would drop the anchor node.
        """
        count = int(count)
        if count < 1:
            raise ValueError(f"A chain needs at least one node, got count={count}")
        if count <= self.anchor_index:
            raise ValueError(f"Cannot shrink to {count} nodes, anchor is node {self.anchor_index}")
        n = len(self.nodes)
        if count == n:
            return

        if count > n:
            last = self.nodes[-1]
            for _ in range(count - n):
                self.nodes.append(Node(last.position, mass=last.mass, radius=last.radius))
        else:
            del self.nodes[count:]
            self.pinned = {i for i in self.pinned if i < count}
            if self.dragged is not None and self.dragged >= count:
                self.dragged = None
        logger.debug("Chain resized from %d to %d nodes", n, count)

    # --- pinning ---------------------------------------------------------

    def is_anchor_locked(self, index: int) -> bool:
        return self.anchor_locked and index == self.anchor_index

    def is_pinned(self, index: int) -> bool:
        return index in self.pinned

    def pin(self, index: int) -> None:
        """Hold a node fixed. Its velocity is zeroed."""
        self._check_index(index)
        self.nodes[index].stop()
        self.pinned.add(index)
        if self.dragged == index:
            self.dragged = None

    def unpin(self, index: int) -> bool:
        """Release a pinned node. Returns False if it was not pinned or is the locked anchor."""
        if index not in self.pinned or self.is_anchor_locked(index):
            return False
        self.pinned.discard(index)
        return True

    def toggle_pin(self, index: int) -> bool:
        """Flip the pinned state of a node and return the new state."""
        if index in self.pinned:
            self.unpin(index)
        else:
            self.pin(index)
        return index in self.pinned

    # --- queries ---------------------------------------------------------

    def is_free(self, index: int) -> bool:
        """True if the integrator should move this node."""
        return index not in self.pinned and index != self.dragged

    def can_drag(self, index: int) -> bool:
        return index not in self.pinned and not self.is_anchor_locked(index)

    def nearest_index(self, point: Vector | tuple[float, float]) -> int:
        """Index of the node closest to point; ties go to the lowest index."""
        p = Vector.of(point)
        best = 0
        best_d = self.nodes[0].position.distance_to(p)
        for i in range(1, len(self.nodes)):
            d = self.nodes[i].position.distance_to(p)
            if d < best_d:
                best, best_d = i, d
        return best

    def positions(self) -> np.ndarray:
        """Node positions as an (N, 2) float64 array (a copy)."""
        return np.array([[n.position.x, n.position.y] for n in self.nodes], dtype=np.float64)

    def velocities(self) -> np.ndarray:
        """Node velocities as an (N, 2) float64 array (a copy)."""
        return np.array([[n.velocity.x, n.velocity.y] for n in self.nodes], dtype=np.float64)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.nodes):
            raise IndexError(f"Node index {index} out of range for chain of {len(self.nodes)}")
