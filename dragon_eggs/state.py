"""Immutable round state: dragon, eggs, decorations and the round outcome."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .config import EGG_SIZE


class Phase(Enum):
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Dragon:
    x: float  # horizontal centre
    size: float  # side of the bounding square, bottom-anchored

    def contains(self, px: float, py: float, screen_height: float) -> bool:
        """True if (px, py) lies strictly inside the dragon's square."""
        half = self.size / 2
        return abs(self.x - px) < half and abs(screen_height - half - py) < half


@dataclass(frozen=True)
class Egg:
    id: int
    x: float  # left edge, fixed at spawn
    y: float  # top edge
    speed: float  # px per tick

    @property
    def center(self) -> tuple[float, float]:
        return self.x + EGG_SIZE / 2, self.y + EGG_SIZE / 2

    def fallen(self) -> Egg:
        return Egg(self.id, self.x, self.y + self.speed, self.speed)


@dataclass(frozen=True)
class Decoration:
    """Static scenery. Clouds use ``y`` as top offset, trees as bottom offset."""
    kind: str
    x: float
    y: float
    size: float


@dataclass(frozen=True)
class RoundState:
    dragon: Dragon
    eggs: tuple[Egg, ...] = ()
    score: int = 0
    time_left_ms: int = 0
    phase: Phase = Phase.ACTIVE
    message: str = ""
    next_egg_id: int = 0
    decorations: tuple[Decoration, ...] = ()

    @property
    def game_over(self) -> bool:
        return self.phase is not Phase.ACTIVE

    @property
    def clouds(self) -> tuple[Decoration, ...]:
        return tuple(d for d in self.decorations if d.kind == "cloud")

    @property
    def trees(self) -> tuple[Decoration, ...]:
        return tuple(d for d in self.decorations if d.kind == "tree")
