# MIT License (see LICENSE)
"""
Summary quantities of the chain state.

Used by tests to detect convergence to rest and by the debug renderer. The
energy here is in the chain's own pixel-per-step units; it is only meaningful
relative to itself.
"""
from __future__ import annotations
import numpy as np

from ..chain import Chain


def kinetic_energy(chain: Chain) -> float:
    """
    Total kinetic energy T = sum(0.5 * m * |v|^2).
    """
    masses = np.array([n.mass for n in chain.nodes], dtype=np.float64)
    v = chain.velocities()
    return float(0.5 * np.sum(masses * np.einsum("ij,ij->i", v, v)))


def max_speed(chain: Chain) -> float:
    """Largest velocity magnitude over all nodes."""
    return float(np.max(np.linalg.norm(chain.velocities(), axis=1)))


def linear_momentum(chain: Chain) -> np.ndarray:
    """
    Total momentum P = sum(m * v) as [Px, Py].
    """
    masses = np.array([n.mass for n in chain.nodes], dtype=np.float64)
    return np.sum(masses[:, None] * chain.velocities(), axis=0)
