# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the drawing interface.
    - DebugRenderer: Text output for debugging and headless runs.
    - NullRenderer: No-op renderer for benchmarks.
    - BufferedRenderer: Records frames as plain data.

The interactive pygame window lives in renderer.pygame_view and is not
imported here, so the package works without pygame installed.

Typical usage:
    from spring_chain.renderer import DebugRenderer

    renderer = DebugRenderer()
    sim.render(renderer)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
