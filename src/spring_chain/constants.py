# MIT License (see LICENSE)
"""
Tuning constants for the spring chain.

None of these are physical units. The chain lives in canvas pixels, time is
measured in milliseconds, and forces are scaled so that a stiffness of a few
units produces a pleasant amount of motion at 60 frames per second.
"""
from __future__ import annotations

# Nominal frame rate. Acceleration is divided by this so a force reads as
# "per nominal frame" regardless of the real elapsed time.
FPS: float = 60.0

# Unitless divisor applied to the net force; tunes visual stiffness.
FORCE_DAMPEN: float = 12.0

# Velocity multiplier applied once per step.
FRICTION: float = 0.98

# Upper bound for the elapsed time fed to one step, in milliseconds.
# Long frames (backgrounded window, debugger pause) are clamped to this.
MAX_DT_MS: float = 17.0

# Release velocity = FLICK_SCALE * last pointer displacement.
FLICK_SCALE: float = 2.0

# Default spring and gravity settings.
SPRING_CONSTANT: float = 4.0
REST_LENGTH: float = 80.0
GRAVITY: float = 9.8

# Default chain layout.
NODE_COUNT: int = 12
NODE_MASS: float = 0.5
NODE_RADIUS: float = 6.0
NODE_GAP: float = 160.0
ORIGIN: tuple[float, float] = (800.0, 250.0)
ANCHOR_INDEX: int = 0
