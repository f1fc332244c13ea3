import os

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pygame

from dragon_eggs.utils import clamp, format_time, gradient_surface, scale_points, vertical_gradient


def test_clamp_basic() -> None:
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_format_time_pads_and_floors() -> None:
    assert format_time(60000) == "60"
    assert format_time(59999) == "59"
    assert format_time(9000) == "09"
    assert format_time(999) == "00"
    assert format_time(-16) == "00"


def test_scale_points() -> None:
    pts = scale_points([(0, 0), (64, 32)], 10, 20, 0.5, 2.0)
    assert pts == [(10, 20), (42, 84)]


def test_vertical_gradient_shape_and_ends() -> None:
    arr = vertical_gradient(4, 5, (0, 0, 0), (200, 100, 50))
    assert arr.shape == (4, 5, 3)
    assert arr.dtype == np.uint8
    assert tuple(arr[0, 0]) == (0, 0, 0)
    assert tuple(arr[3, 4]) == (200, 100, 50)
    # Columns are identical
    assert (arr[0] == arr[3]).all()


def test_gradient_surface() -> None:
    pygame.init()
    try:
        surf = gradient_surface(8, 10, (10, 20, 30), (40, 50, 60))
        assert surf.get_size() == (8, 10)
        assert surf.get_at((3, 0))[:3] == (10, 20, 30)
        assert surf.get_at((3, 9))[:3] == (40, 50, 60)
    finally:
        pygame.quit()
