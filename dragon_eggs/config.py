"""Game configuration constants and runtime settings for Dragon Eggs."""

from __future__ import annotations

from dataclasses import dataclass

# Window (portrait, phone-like)
WINDOW_WIDTH = 480
WINDOW_HEIGHT = 800
FPS = 60

# Round
GAME_DURATION_MS = 60 * 1000
TICK_MS = 16  # fixed quantum per frame, ~60 FPS

# Dragon
INITIAL_DRAGON_SIZE = 64
GROWTH_FACTOR = 1.1  # multiplicative, per catch
WIN_SIZE_MULTIPLIER = 3.0

# Eggs
EGG_SIZE = 32
SPAWN_PROBABILITY = 0.01  # per tick
EGG_MIN_SPEED = 3.0  # px/tick
EGG_MAX_SPEED = 7.0

# Outcome messages
MESSAGE_WON = "YOU WON DUDE!"
MESSAGE_LOST = "YOU LOST!!!"

# Palette
SKY_COLOR = (135, 206, 235)  # #87CEEB
SKY_HORIZON = (190, 228, 244)
DRAGON_GREEN = (46, 204, 113)  # #2ecc71
DRAGON_SPIKES = (231, 76, 60)  # #e74c3c
DRAGON_WINGS = (52, 152, 219)  # #3498db
EYE_WHITE = (255, 255, 255)
EYE_PUPIL = (0, 0, 0)
EGG_SHELL = (243, 156, 18)  # #f39c12
EGG_SPOTS = (230, 126, 34)  # #e67e22
CLOUD_COLOR = (236, 240, 241)  # #ecf0f1
TREE_TRUNK = (121, 85, 72)  # #795548
TREE_LEAVES = (46, 204, 113)
TREE_LEAVES_DARK = (39, 174, 96)  # #27ae60
TEXT_COLOR = (0, 0, 0)
MESSAGE_COLOR = (255, 0, 0)
BUTTON_COLOR = (46, 204, 113)
BUTTON_TEXT_COLOR = (255, 255, 255)

# HUD / game over layout
HUD_MARGIN = 10
HUD_FONT_SIZE = 28
MESSAGE_FONT_SIZE = 48
BUTTON_FONT_SIZE = 18
BUTTON_WIDTH = 100
BUTTON_HEIGHT = 40


@dataclass(frozen=True)
class Settings:
    """Runtime choices read once at startup."""
    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    fps: int = FPS
    clamp_dragon: bool = False  # keep the dragon's square inside the viewport
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width <= EGG_SIZE or self.height <= 0:
            raise ValueError(
                f"Viewport must be wider than an egg ({EGG_SIZE}px) and have positive height, "
                f"got {self.width}x{self.height}"
            )
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    @property
    def win_size(self) -> float:
        return INITIAL_DRAGON_SIZE * WIN_SIZE_MULTIPLIER
