"""Procedural sprites: dragon, egg, cloud and tree.

Each sprite is a list of filled primitives in its own viewbox units. The
draw functions are stateless: they scale the viewbox to the numeric props
they are given and paint onto the surface.
"""

from __future__ import annotations

from typing import Sequence, Union

import pygame

from .config import (
    CLOUD_COLOR,
    DRAGON_GREEN,
    DRAGON_SPIKES,
    DRAGON_WINGS,
    EGG_SHELL,
    EGG_SIZE,
    EGG_SPOTS,
    EYE_PUPIL,
    EYE_WHITE,
    TREE_LEAVES,
    TREE_LEAVES_DARK,
    TREE_TRUNK,
)
from .utils import scale_points

Color = tuple[int, int, int]
# ("rect", (x, y, w, h), color) or ("poly", ((x, y), ...), color)
Shape = tuple[str, Union[tuple[float, ...], tuple[tuple[float, float], ...]], Color]

DRAGON_VIEWBOX = (64, 64)
DRAGON_SHAPES: list[Shape] = [
    ("rect", (16, 24, 32, 24), DRAGON_GREEN),  # body
    ("rect", (8, 16, 16, 16), DRAGON_GREEN),  # head
    ("rect", (12, 20, 4, 4), EYE_WHITE),
    ("rect", (14, 22, 2, 2), EYE_PUPIL),
    ("poly", ((24, 16), (28, 8), (32, 16), (36, 8), (40, 16)), DRAGON_SPIKES),
    ("rect", (16, 48, 8, 8), DRAGON_GREEN),  # legs
    ("rect", (40, 48, 8, 8), DRAGON_GREEN),
    ("poly", ((48, 32), (56, 32), (56, 40), (48, 40)), DRAGON_GREEN),  # tail
    ("poly", ((24, 24), (8, 8), (24, 16)), DRAGON_WINGS),
    ("poly", ((40, 24), (56, 8), (40, 16)), DRAGON_WINGS),
]

EGG_VIEWBOX = (64, 64)
EGG_SHAPES: list[Shape] = [
    ("rect", (8, 32, 16, 24), EGG_SHELL),
    ("rect", (12, 28, 8, 4), EGG_SHELL),
    ("rect", (10, 56, 12, 4), EGG_SHELL),
    ("rect", (12, 36, 4, 4), EGG_SPOTS),
    ("rect", (16, 44, 4, 4), EGG_SPOTS),
]

CLOUD_VIEWBOX = (64, 32)
CLOUD_SHAPES: list[Shape] = [
    ("rect", (0, 16, 64, 16), CLOUD_COLOR),
    ("rect", (8, 8, 48, 16), CLOUD_COLOR),
    ("rect", (16, 0, 32, 16), CLOUD_COLOR),
]

TREE_VIEWBOX = (64, 96)
TREE_SHAPES: list[Shape] = [
    ("rect", (24, 64, 16, 32), TREE_TRUNK),
    ("poly", ((0, 64), (32, 0), (64, 64)), TREE_LEAVES),
    ("poly", ((8, 96), (32, 32), (56, 96)), TREE_LEAVES_DARK),
]


def draw_shapes(
    surf: pygame.Surface,
    shapes: Sequence[Shape],
    viewbox: tuple[float, float],
    left: float,
    top: float,
    width: float,
    height: float,
) -> None:
    """Paint ``shapes`` with their viewbox stretched over the given box."""
    sx = width / viewbox[0]
    sy = height / viewbox[1]
    for kind, geom, color in shapes:
        if kind == "rect":
            x, y, w, h = geom
            # Round the edges, not the size, so neighbouring rects stay seamless
            x0, y0 = round(left + x * sx), round(top + y * sy)
            x1, y1 = round(left + (x + w) * sx), round(top + (y + h) * sy)
            if x1 > x0 and y1 > y0:
                pygame.draw.rect(surf, color, pygame.Rect(x0, y0, x1 - x0, y1 - y0))
        elif kind == "poly":
            pygame.draw.polygon(surf, color, scale_points(geom, left, top, sx, sy))
        else:
            raise ValueError(f"Unknown shape kind: {kind!r}")


def draw_dragon(surf: pygame.Surface, x: float, size: float) -> None:
    h = surf.get_height()
    draw_shapes(surf, DRAGON_SHAPES, DRAGON_VIEWBOX, x - size / 2, h - size, size, size)


def draw_egg(surf: pygame.Surface, x: float, y: float) -> None:
    draw_shapes(surf, EGG_SHAPES, EGG_VIEWBOX, x, y, EGG_SIZE, EGG_SIZE)


def draw_cloud(surf: pygame.Surface, x: float, y: float, size: float) -> None:
    draw_shapes(surf, CLOUD_SHAPES, CLOUD_VIEWBOX, x, y, size, size / 2)


def draw_tree(surf: pygame.Surface, x: float, y: float, size: float) -> None:
    """``y`` is the distance between the tree's base and the bottom edge."""
    height = size * 1.5
    draw_shapes(surf, TREE_SHAPES, TREE_VIEWBOX, x, surf.get_height() - y - height, size, height)
