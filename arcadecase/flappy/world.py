"""The scrolling scenery and the logs the bird flies through."""

import random
from typing import List, Optional

import pygame

from arcadecase.flappy.bird import Rect
from arcadecase.flappy.factory import Factory
from arcadecase.flappy.logs import LogPair
from arcadecase.flappy.settings import (
    BACK_SCROLL_SPEED,
    BACKGROUND_LOOPING_POINT,
    GROUND_HEIGHT,
    LOG_HEIGHT,
    MAIN_SCROLL_SPEED,
    TIME_TO_SPAWN_LOGS,
    VIRTUAL_HEIGHT,
    VIRTUAL_WIDTH,
    Assets,
)


class World:
    """Background, ground and log pairs, optionally spawning new logs."""

    def __init__(
        self,
        generate_logs: bool = False,
        assets: Optional[Assets] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.generate_logs = generate_logs
        self.assets = assets
        self.rng = rng if rng is not None else random.Random()
        self.background_x = 0.0
        self.ground_x = 0.0
        self.log_factory: Factory[LogPair] = Factory(LogPair)
        self.logs: List[LogPair] = []
        self.logs_spawn_timer = 0.0
        self.last_log_y = -LOG_HEIGHT + self.rng.randint(0, 80) + 20

    def reset(self, generate_logs: bool) -> None:
        self.generate_logs = generate_logs

    def collides(self, rect: Rect) -> bool:
        """Return True when ``rect`` touches the ground or any log."""
        if rect.top + rect.height >= VIRTUAL_HEIGHT:
            return True
        return any(pair.collides(rect) for pair in self.logs)

    def update_scored(self, rect: Rect) -> bool:
        """Return True when ``rect`` has just passed a log pair."""
        return any(pair.update_scored(rect) for pair in self.logs)

    def _spawn_logs(self, dt: float) -> None:
        self.logs_spawn_timer += dt
        if self.logs_spawn_timer < TIME_TO_SPAWN_LOGS:
            return
        self.logs_spawn_timer = 0.0
        y = max(
            -LOG_HEIGHT + 10,
            min(self.last_log_y + self.rng.randint(-20, 20), VIRTUAL_HEIGHT + 90 - LOG_HEIGHT),
        )
        self.last_log_y = y
        self.logs.append(self.log_factory.create(VIRTUAL_WIDTH, y, self.assets))

    def update(self, dt: float) -> None:
        if self.generate_logs:
            self._spawn_logs(dt)

        self.background_x += -BACK_SCROLL_SPEED * dt
        if self.background_x <= -BACKGROUND_LOOPING_POINT:
            self.background_x = 0.0

        self.ground_x += -MAIN_SCROLL_SPEED * dt
        if self.ground_x <= -VIRTUAL_WIDTH:
            self.ground_x = 0.0

        kept = []
        for pair in self.logs:
            if pair.is_out_of_game():
                self.log_factory.remove(pair)
            else:
                pair.update(dt)
                kept.append(pair)
        self.logs = kept

    def render(self, target: pygame.Surface) -> None:
        textures = self.assets.textures if self.assets is not None else {}
        if "background" in textures:
            target.blit(textures["background"], (int(self.background_x), 0))
        for pair in self.logs:
            pair.render(target)
        if "ground" in textures:
            target.blit(textures["ground"], (int(self.ground_x), int(VIRTUAL_HEIGHT - GROUND_HEIGHT)))