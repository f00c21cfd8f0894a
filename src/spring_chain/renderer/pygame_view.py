# MIT License (see LICENSE)
"""
Interactive pygame window for the spring chain.

PygameRenderer draws the chain onto a pygame surface. PygameView owns the
window and the frame loop: every frame it forwards pointer and keyboard
events to the Simulation, ticks it with the wall clock and redraws.

Controls:
    drag            grab the nearest node and throw it on release
    Shift + click   pin / unpin the nearest node
    K / k           spring constant up / down
    L / l           rest length up / down
    G / g           gravity up / down
    + / -           add / remove a node
    r               reset the chain
    Esc             quit

pygame is an optional dependency (`pip install spring-chain[viewer]`); this
module is the only one that imports it.
"""
from __future__ import annotations

import pygame

from ..scene import Simulation
from ..types import Node
from ..vector import Vector
from .adapter import RendererAdapter

WIDTH, HEIGHT = 1600, 1000
BG_COLOR = (245, 245, 245)
SPRING_COLOR = (0, 0, 0)
NODE_COLOR = (10, 10, 10)
PINNED_COLOR = (200, 40, 40)
DRAGGED_COLOR = (30, 144, 255)
TEXT_COLOR = (0, 0, 0)
SPRING_WIDTH = 4

# Parameter increments per key press.
K_STEP = 0.5
LENGTH_STEP = 5.0
GRAVITY_STEP = 0.5


class PygameRenderer(RendererAdapter):
    """Draw springs as lines and nodes as circles on a pygame surface."""

    def __init__(self, surface: pygame.Surface, ratio: float = 1.0):
        self.surface = surface
        self.ratio = ratio

    def _to_screen(self, p: Vector) -> tuple[int, int]:
        return int(round(p.x * self.ratio)), int(round(p.y * self.ratio))

    def begin_frame(self, frame: int, time_ms: float) -> None:
        self.surface.fill(BG_COLOR)

    def draw_spring(self, a: Vector, b: Vector) -> None:
        pygame.draw.line(self.surface, SPRING_COLOR, self._to_screen(a), self._to_screen(b), SPRING_WIDTH)

    def draw_node(self, index: int, node: Node, pinned: bool, dragged: bool) -> None:
        color = PINNED_COLOR if pinned else DRAGGED_COLOR if dragged else NODE_COLOR
        radius = max(1, int(round(node.radius * self.ratio)))
        pygame.draw.circle(self.surface, color, self._to_screen(node.position), radius)

    def end_frame(self) -> None:
        pass


class PygameView:
    """
    Window, event dispatch and frame loop around a Simulation.

    Args:
        sim: The simulation to drive.
        ratio: Device pixel ratio. Pointer positions are divided by it to get
               model coordinates; drawing multiplies by it.
        size: Window size in pixels.
    """

    def __init__(self, sim: Simulation, ratio: float = 1.0, size: tuple[int, int] = (WIDTH, HEIGHT)):
        pygame.init()
        self.sim = sim
        self.ratio = ratio
        self.screen = pygame.display.set_mode(size)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, 20)
        self.renderer = PygameRenderer(self.screen, ratio)
        self.running = True

    def _model_pos(self, pos: tuple[int, int]) -> Vector:
        return Vector(pos[0] / self.ratio, pos[1] / self.ratio)

    def _handle_key(self, event: pygame.event.Event) -> None:
        sim, params = self.sim, self.sim.params
        if event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.key in (pygame.K_LSHIFT, pygame.K_RSHIFT):
            sim.set_pin_modifier(True)
        elif event.unicode == "K":
            sim.set_spring_constant(params.spring_constant + K_STEP)
        elif event.unicode == "k":
            sim.set_spring_constant(max(0.0, params.spring_constant - K_STEP))
        elif event.unicode == "L":
            sim.set_rest_length(params.rest_length + LENGTH_STEP)
        elif event.unicode == "l":
            sim.set_rest_length(max(0.0, params.rest_length - LENGTH_STEP))
        elif event.unicode == "G":
            sim.set_gravity(params.gravity + GRAVITY_STEP)
        elif event.unicode == "g":
            sim.set_gravity(params.gravity - GRAVITY_STEP)
        elif event.unicode in ("+", "="):
            sim.set_node_count(params.node_count + 1)
        elif event.unicode == "-":
            sim.set_node_count(params.node_count - 1)
        elif event.unicode in ("r", "R"):
            sim.reset()

    def _process_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event)
            elif event.type == pygame.KEYUP and event.key in (pygame.K_LSHIFT, pygame.K_RSHIFT):
                self.sim.set_pin_modifier(False)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.sim.pointer_down(self._model_pos(event.pos))
            elif event.type == pygame.MOUSEMOTION:
                self.sim.pointer_move(self._model_pos(event.pos))
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.sim.pointer_up(self._model_pos(event.pos))

    def _draw_hud(self) -> None:
        params = self.sim.params
        lines = [
            f"k: {params.spring_constant:0.2f}  (K/k)",
            f"length: {params.rest_length:0.1f}  (L/l)",
            f"g: {params.gravity:0.2f}  (G/g)",
            f"nodes: {params.node_count}  (+/-)",
            "drag: throw | shift+click: pin | r: reset | Esc: quit",
        ]
        if self.sim.frozen:
            lines.append("chain frozen (numeric blow-up), press r")
        y = 8
        for txt in lines:
            surf = self.font.render(txt, True, TEXT_COLOR)
            self.screen.blit(surf, (8, y))
            y += 20

    def run(self) -> None:
        while self.running:
            self._process_events()
            self.sim.tick()
            self.sim.render(self.renderer)
            self._draw_hud()
            pygame.display.flip()
            self.clock.tick(int(self.sim.params.fps))
            pygame.display.set_caption(f"spring chain  fps: {self.clock.get_fps():.1f}")
        pygame.quit()
