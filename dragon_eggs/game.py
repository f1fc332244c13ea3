"""Game loop, input handling and rendering composition for Dragon Eggs."""

from __future__ import annotations

import logging
import random
import sys

import pygame

from .config import (
    BUTTON_COLOR,
    BUTTON_FONT_SIZE,
    BUTTON_HEIGHT,
    BUTTON_TEXT_COLOR,
    BUTTON_WIDTH,
    HUD_FONT_SIZE,
    HUD_MARGIN,
    MESSAGE_COLOR,
    MESSAGE_FONT_SIZE,
    SKY_COLOR,
    SKY_HORIZON,
    TEXT_COLOR,
    Settings,
)
from .entities import draw_cloud, draw_dragon, draw_egg, draw_tree
from .rules import initial_state, move_dragon, reset, step
from .scheduler import FrameScheduler
from .utils import format_time, gradient_surface

logger = logging.getLogger(__name__)


class Game:
    """Top-level game controller: owns the round state, input, frame loop and draw."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        pygame.init()
        self.screen = pygame.display.set_mode((self.settings.width, self.settings.height), pygame.DOUBLEBUF)
        pygame.display.set_caption("Dragon Eggs")
        self.clock = pygame.time.Clock()
        self.font_hud = pygame.font.SysFont("courier", HUD_FONT_SIZE)
        self.font_message = pygame.font.SysFont("courier", MESSAGE_FONT_SIZE, bold=True)
        self.font_button = pygame.font.SysFont("courier", BUTTON_FONT_SIZE, bold=True)
        self.rng = random.Random(self.settings.seed)
        self.scheduler = FrameScheduler()
        self._frame_handle: int | None = None

        # Precompute sky background
        self.sky = gradient_surface(self.settings.width, self.settings.height, SKY_COLOR, SKY_HORIZON)

        w, h = self.settings.width, self.settings.height
        self.button_rect = pygame.Rect(w // 2 - BUTTON_WIDTH // 2, h // 2 + 50, BUTTON_WIDTH, BUTTON_HEIGHT)

        self.state = initial_state(self.settings)
        self._start_loop()
        logger.info("Round started (%dx%d, seed=%s)", w, h, self.settings.seed)

    def _start_loop(self) -> None:
        # Never leave a second loop behind
        self.scheduler.cancel(self._frame_handle)
        self._frame_handle = self.scheduler.request(self._on_frame)

    def _on_frame(self) -> None:
        self._frame_handle = None
        self.state = step(self.state, self.settings, self.rng)
        if self.state.game_over:
            self._end_round()
        else:
            self._frame_handle = self.scheduler.request(self._on_frame)

    def _end_round(self) -> None:
        self.scheduler.cancel(self._frame_handle)
        self._frame_handle = None
        logger.info("Round over: %s (score %d)", self.state.message, self.state.score)

    @property
    def running(self) -> bool:
        return self._frame_handle is not None

    def reset(self) -> None:
        self.state = reset(self.state, self.settings)
        self._start_loop()

    def touch(self, x: float) -> None:
        self.state = move_dragon(self.state, x, self.settings)

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_r:
                self.reset()
            elif event.key == pygame.K_ESCAPE:
                pygame.event.post(pygame.event.Event(pygame.QUIT))
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # SDL mirrors touches as mouse events; FINGER* handles those
            if event.button != 1 or getattr(event, "touch", False):
                return
            self._press(*event.pos)
        elif event.type == pygame.MOUSEMOTION:
            if event.buttons[0] and not getattr(event, "touch", False) and not self.state.game_over:
                self.touch(event.pos[0])
        elif event.type == pygame.FINGERDOWN:
            self._press(event.x * self.settings.width, event.y * self.settings.height)
        elif event.type == pygame.FINGERMOTION:
            if not self.state.game_over:
                self.touch(event.x * self.settings.width)

    def _press(self, x: float, y: float) -> None:
        if self.state.game_over:
            if self.button_rect.collidepoint(x, y):
                self.reset()
        else:
            self.touch(x)

    def update(self) -> None:
        self.scheduler.run_pending()

    def draw(self) -> None:
        if self.state.game_over:
            self._draw_game_over(self.screen)
        else:
            self._draw_scene(self.screen)
        pygame.display.flip()

    def _draw_scene(self, surf: pygame.Surface) -> None:
        surf.blit(self.sky, (0, 0))
        for cloud in self.state.clouds:
            draw_cloud(surf, cloud.x, cloud.y, cloud.size)
        for tree in self.state.trees:
            draw_tree(surf, tree.x, tree.y, tree.size)
        self._draw_hud(surf)
        for egg in self.state.eggs:
            draw_egg(surf, egg.x, egg.y)
        draw_dragon(surf, self.state.dragon.x, self.state.dragon.size)

    def _draw_hud(self, surf: pygame.Surface) -> None:
        score = self.font_hud.render(f"Score: {self.state.score}", True, TEXT_COLOR)
        surf.blit(score, (HUD_MARGIN, HUD_MARGIN))
        timer = self.font_hud.render(f"Time: {format_time(self.state.time_left_ms)}", True, TEXT_COLOR)
        surf.blit(timer, (HUD_MARGIN, HUD_MARGIN * 2 + score.get_height()))

    def _draw_game_over(self, surf: pygame.Surface) -> None:
        w, h = self.settings.width, self.settings.height
        surf.blit(self.sky, (0, 0))
        message = self.font_message.render(self.state.message, True, MESSAGE_COLOR)
        surf.blit(message, message.get_rect(center=(w // 2, h // 2 - 50)))
        pygame.draw.rect(surf, BUTTON_COLOR, self.button_rect, border_radius=5)
        label = self.font_button.render("Play Again", True, BUTTON_TEXT_COLOR)
        surf.blit(label, label.get_rect(center=self.button_rect.center))

    def run(self) -> None:
        while True:
            self.clock.tick(self.settings.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.quit()
                    sys.exit(0)
                self.handle_input(event)

            self.update()
            self.draw()


def main(settings: Settings | None = None) -> None:
    Game(settings).run()
