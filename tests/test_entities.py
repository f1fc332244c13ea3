import os

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from dragon_eggs.config import (
    CLOUD_COLOR,
    DRAGON_GREEN,
    EGG_SHELL,
    EYE_PUPIL,
    SKY_COLOR,
    TREE_LEAVES_DARK,
)
from dragon_eggs.entities import (
    DRAGON_SHAPES,
    DRAGON_VIEWBOX,
    draw_cloud,
    draw_dragon,
    draw_egg,
    draw_shapes,
    draw_tree,
)


def setup_module(module: object) -> None:
    pygame.init()


def teardown_module(module: object) -> None:
    pygame.quit()


def blank(w: int = 400, h: int = 400) -> pygame.Surface:
    surf = pygame.Surface((w, h))
    surf.fill(SKY_COLOR)
    return surf


def rgb(surf: pygame.Surface, x: int, y: int) -> tuple[int, int, int]:
    return tuple(surf.get_at((x, y)))[:3]


def test_dragon_rests_on_bottom_edge() -> None:
    surf = blank()
    draw_dragon(surf, 200, 64)
    # Left leg: viewbox (16..24, 48..56) -> screen x 184..192, y 384..392
    assert rgb(surf, 186, 390) == DRAGON_GREEN
    # Body centre
    assert rgb(surf, 200, 372) == DRAGON_GREEN
    # Nothing drawn above the dragon's square
    assert rgb(surf, 200, 330) == SKY_COLOR


def test_dragon_scales_with_size() -> None:
    surf = blank()
    draw_dragon(surf, 200, 128)
    # Pupil: viewbox (14..16, 22..24) scaled x2 from top-left (136, 272)
    assert rgb(surf, 165, 317) == EYE_PUPIL
    assert rgb(surf, 200, 360) == DRAGON_GREEN


def test_egg_drawn_in_its_box() -> None:
    surf = blank()
    draw_egg(surf, 100, 50)
    # Shell rect viewbox (8, 32, 16, 24) at half scale -> (104..112, 66..78)
    assert rgb(surf, 108, 70) == EGG_SHELL
    # Right half of the egg box stays empty
    assert rgb(surf, 125, 70) == SKY_COLOR


def test_cloud_and_tree() -> None:
    surf = blank()
    draw_cloud(surf, 10, 10, 100)
    assert rgb(surf, 60, 50) == CLOUD_COLOR
    draw_tree(surf, 200, 0, 64)
    # The dark lower canopy covers the trunk near the ground
    assert rgb(surf, 232, 398) == TREE_LEAVES_DARK


def test_tree_offset_from_bottom() -> None:
    surf = blank()
    draw_tree(surf, 200, 50, 64)
    assert rgb(surf, 232, 398) == SKY_COLOR
    assert rgb(surf, 232, 348) == TREE_LEAVES_DARK


def test_draw_shapes_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        draw_shapes(blank(), [("circle", (0, 0, 1), (0, 0, 0))], (64, 64), 0, 0, 64, 64)


def test_offscreen_dragon_does_not_raise() -> None:
    surf = blank()
    draw_shapes(surf, DRAGON_SHAPES, DRAGON_VIEWBOX, -500, -500, 64, 64)
    draw_dragon(surf, 10_000, 64)
    assert rgb(surf, 0, 0) == SKY_COLOR
