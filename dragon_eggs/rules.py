"""Round transitions: tick, catch check, dragon movement and reset.

Every function takes the previous ``RoundState`` and returns the next one.
None of them touch pygame, so a whole round can be simulated without a display.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import replace

from .config import (
    EGG_MAX_SPEED,
    EGG_MIN_SPEED,
    EGG_SIZE,
    GAME_DURATION_MS,
    GROWTH_FACTOR,
    INITIAL_DRAGON_SIZE,
    MESSAGE_LOST,
    MESSAGE_WON,
    SPAWN_PROBABILITY,
    TICK_MS,
    Settings,
)
from .state import Decoration, Dragon, Egg, Phase, RoundState
from .utils import clamp

logger = logging.getLogger(__name__)

# (relative x, relative y, size) for clouds; trees sit on the ground (y = bottom offset)
CLOUD_LAYOUT = ((0.1, 0.1, 100), (0.5, 0.2, 120), (0.8, 0.15, 80))
TREE_LAYOUT = ((0.2, 0.0, 80), (0.6, 0.0, 100), (0.9, 0.0, 60))


def make_decorations(settings: Settings) -> tuple[Decoration, ...]:
    clouds = [
        Decoration("cloud", settings.width * rx, settings.height * ry, size)
        for rx, ry, size in CLOUD_LAYOUT
    ]
    trees = [Decoration("tree", settings.width * rx, ry, size) for rx, ry, size in TREE_LAYOUT]
    return tuple(clouds + trees)


def initial_state(settings: Settings) -> RoundState:
    """Fresh round: centred dragon at default size, no eggs, full clock."""
    return RoundState(
        dragon=Dragon(x=settings.width / 2, size=float(INITIAL_DRAGON_SIZE)),
        eggs=(),
        score=0,
        time_left_ms=GAME_DURATION_MS,
        phase=Phase.ACTIVE,
        message="",
        next_egg_id=0,
        decorations=make_decorations(settings),
    )


def reset(state: RoundState, settings: Settings) -> RoundState:
    logger.info("Round reset (previous: %s, score %d)", state.phase.value, state.score)
    return initial_state(settings)


def spawn_egg(state: RoundState, settings: Settings, rng: random.Random) -> RoundState:
    egg = Egg(
        id=state.next_egg_id,
        x=rng.random() * (settings.width - EGG_SIZE),
        y=-EGG_SIZE,
        speed=rng.uniform(EGG_MIN_SPEED, EGG_MAX_SPEED),
    )
    logger.debug("Spawned egg %d at x=%.1f speed=%.2f", egg.id, egg.x, egg.speed)
    return replace(state, eggs=state.eggs + (egg,), next_egg_id=egg.id + 1)


def tick(state: RoundState, settings: Settings, rng: random.Random) -> RoundState:
    """Advance the clock by one quantum, move eggs and maybe spawn one."""
    if state.game_over:
        return state

    time_left = max(0, state.time_left_ms - TICK_MS)
    if time_left == 0:
        logger.info("Time is up, score %d", state.score)
        return replace(state, time_left_ms=0, phase=Phase.LOST, message=MESSAGE_LOST)

    # Eggs at or past the bottom edge are gone before anyone can catch them
    eggs = tuple(e for e in (egg.fallen() for egg in state.eggs) if e.y < settings.height)
    state = replace(state, time_left_ms=time_left, eggs=eggs)

    if rng.random() < SPAWN_PROBABILITY:
        state = spawn_egg(state, settings, rng)
    return state


def check_catches(state: RoundState, settings: Settings) -> RoundState:
    """Apply every catch of this tick, then test the win condition.

    All eggs are tested against the dragon as it was at the start of the pass;
    growth compounds once per caught egg.
    """
    if state.game_over:
        return state

    dragon = state.dragon
    caught = {
        egg.id for egg in state.eggs if dragon.contains(*egg.center, screen_height=settings.height)
    }
    size = dragon.size
    for _ in caught:
        size *= GROWTH_FACTOR
    if caught:
        logger.debug("Caught eggs %s, size %.1f -> %.1f", sorted(caught), dragon.size, size)
        state = replace(
            state,
            dragon=replace(dragon, size=size),
            eggs=tuple(e for e in state.eggs if e.id not in caught),
            score=state.score + len(caught),
        )

    if state.dragon.size >= settings.win_size:
        logger.info("Dragon reached %.1fpx, round won with score %d", state.dragon.size, state.score)
        state = replace(state, phase=Phase.WON, message=MESSAGE_WON)
    return state


def step(state: RoundState, settings: Settings, rng: random.Random) -> RoundState:
    """One frame: tick then catch check."""
    return check_catches(tick(state, settings, rng), settings)


def move_dragon(state: RoundState, x: float, settings: Settings) -> RoundState:
    """Put the dragon's centre at the touch x. Ignored once the round is over."""
    if not math.isfinite(x):
        raise ValueError(f"Touch coordinate must be finite, got {x!r}")
    if state.game_over:
        return state
    if settings.clamp_dragon:
        half = state.dragon.size / 2
        x = clamp(x, half, max(half, settings.width - half))
    return replace(state, dragon=replace(state.dragon, x=float(x)))
