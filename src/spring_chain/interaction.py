# MIT License (see LICENSE)
"""
Pointer interaction: picking, pinning, dragging and flicking nodes.

The controller turns press/move/release events (already in model
coordinates) into operations on a Chain:

    press            pick the nearest node; with the pin modifier held,
                     toggle its pin, otherwise start dragging it
    move (dragging)  translate the dragged node by the pointer delta
    release          give the node a velocity of flick_scale * last delta
                     and stop dragging

Dragging is delta based, so grabbing a node off-centre does not make it jump
to the cursor. Pinned nodes and a locked anchor cannot be dragged.
"""
from __future__ import annotations
import logging

from .chain import Chain
from .params import SimParameters
from .vector import Vector

logger = logging.getLogger(__name__)

IDLE = "idle"
DRAGGING = "dragging"


class InteractionController:
    """
    State machine over {idle, dragging} driven by pointer events.

    Attributes:
        chain: The chain being manipulated.
        params: Read for flick_scale on release.
        pin_modifier: Whether the pin-toggle key (Shift) is currently held.
        last_pointer: Last pointer position seen by any event.
    """

    def __init__(self, chain: Chain, params: SimParameters) -> None:
        self.chain = chain
        self.params = params
        self.pin_modifier = False
        self.last_pointer = Vector.zero()

    @property
    def state(self) -> str:
        # Derived from the chain so that a resize that drops the dragged
        # node also ends the drag here.
        return IDLE if self.chain.dragged is None else DRAGGING

    def set_pin_modifier(self, pressed: bool) -> None:
        self.pin_modifier = bool(pressed)

    def pointer_down(
        self,
        pos: Vector | tuple[float, float],
        pin_modifier: bool | None = None,
    ) -> int | None:
        """
        Handle a press at `pos`.

        Args:
            pos: Pointer position in model coordinates.
            pin_modifier: Overrides the tracked modifier state for this event.

        Returns:
            The index that was pinned/unpinned or grabbed, or None if the
            press did nothing (already dragging, or the node is not draggable).
        """
        if self.state == DRAGGING:
            return None
        p = Vector.of(pos)
        self.last_pointer = p

        index = self.chain.nearest_index(p)
        toggling = self.pin_modifier if pin_modifier is None else pin_modifier
        if toggling:
            if self.chain.is_anchor_locked(index):
                return None
            pinned = self.chain.toggle_pin(index)
            logger.debug("Node %d %s", index, "pinned" if pinned else "unpinned")
            return index

        if not self.chain.can_drag(index):
            return None
        self.chain.dragged = index
        self.chain[index].stop()
        logger.debug("Dragging node %d", index)
        return index

    def pointer_move(self, pos: Vector | tuple[float, float]) -> None:
        """Move the dragged node by the pointer delta since the last event."""
        p = Vector.of(pos)
        if self.state == DRAGGING:
            self.chain[self.chain.dragged].move(p - self.last_pointer)
        self.last_pointer = p

    def pointer_up(self, pos: Vector | tuple[float, float]) -> int | None:
        """
        Release the dragged node with a flick impulse.

        The node's velocity becomes flick_scale * (pos - last pointer position).

        Returns:
            The released index, or None if nothing was being dragged.
        """
        p = Vector.of(pos)
        index = self.chain.dragged
        if index is not None:
            self.chain[index].velocity = (p - self.last_pointer) * self.params.flick_scale
            self.chain.dragged = None
            logger.debug("Released node %d", index)
        self.last_pointer = p
        return index

    def cancel(self) -> None:
        """End a drag without imparting any velocity."""
        self.chain.dragged = None
