"""Geometry, colour and formatting helpers used across the game."""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pygame


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


def format_time(ms: float) -> str:
    """Whole seconds left, zero padded to two digits."""
    seconds = int(max(0, ms) // 1000)
    return f"{seconds:02d}"


def scale_points(
    points: Sequence[tuple[float, float]],
    left: float,
    top: float,
    sx: float,
    sy: float,
) -> list[tuple[int, int]]:
    """Map viewbox points into screen space."""
    return [(round(left + px * sx), round(top + py * sy)) for (px, py) in points]


def vertical_gradient(w: int, h: int, top: tuple[int, int, int], bottom: tuple[int, int, int]) -> np.ndarray:
    """Build a (w, h, 3) uint8 array blending ``top`` into ``bottom``, for surfarray."""
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[:, None]
    rows = np.asarray(top, dtype=np.float32) * (1.0 - t) + np.asarray(bottom, dtype=np.float32) * t
    c = np.clip(np.rint(rows), 0, 255).astype(np.uint8)
    return np.broadcast_to(c[None, :, :], (w, h, 3)).copy()


def gradient_surface(w: int, h: int, top: tuple[int, int, int], bottom: tuple[int, int, int]) -> pygame.Surface:
    """Precompute a vertical gradient as a surface for fast blitting."""
    return pygame.surfarray.make_surface(vertical_gradient(w, h, top, bottom))
