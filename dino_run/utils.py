"""Geometry and color utility functions used across the game."""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from .config import COLLISION_TOLERANCE

# (x, y, width, height)
Box = Tuple[float, float, float, float]


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


def boxes_collide(player: Box, obstacle: Box, tolerance: float = COLLISION_TOLERANCE) -> bool:
    """True if the player box, shrunk by ``tolerance`` on every side, overlaps the obstacle box.

    Touching edges do not count as overlap.
    """
    px, py, pw, ph = player
    ox, oy, ow, oh = obstacle
    return (
        px + tolerance < ox + ow
        and px + pw - tolerance > ox
        and py + tolerance < oy + oh
        and py + ph - tolerance > oy
    )


def ground_marker_xs(ticks: int, speed: float, width: int, interval: int) -> list[float]:
    """X positions of the ground markers, scrolled by ``ticks * speed``."""
    offset = math.fmod(ticks * speed, interval)
    xs: list[float] = []
    x = -offset
    while x < width:
        xs.append(x)
        x += interval
    return xs


def scale_color(color: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    """Scale an RGB color by factor, clamped to [0,255]."""
    r, g, b = color
    return (
        int(clamp(r * factor, 0, 255)),
        int(clamp(g * factor, 0, 255)),
        int(clamp(b * factor, 0, 255)),
    )


def vertical_gradient(
    w: int,
    h: int,
    top: tuple[int, int, int],
    bottom: tuple[int, int, int],
) -> np.ndarray:
    """Build a top-to-bottom RGB gradient using NumPy.

    Returns:
        A ``(w, h, 3)`` uint8 array laid out for ``pygame.surfarray``.
    """
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[:, None]
    rows = np.asarray(top, dtype=np.float32) * (1.0 - t) + np.asarray(bottom, dtype=np.float32) * t
    c = np.clip(np.rint(rows), 0, 255).astype(np.uint8)
    return np.broadcast_to(c[None, :, :], (w, h, 3)).copy()
