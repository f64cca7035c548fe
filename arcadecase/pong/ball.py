"""The pong ball."""

import pygame

from arcadecase.pong.hitbox import Hitbox
from arcadecase.pong.settings import WHITE


class Ball:
    """A square ball moving with a constant velocity."""

    def __init__(self, x: float, y: float, size: float) -> None:
        self.reset(x, y, size)

    def reset(self, x: float, y: float, size: float) -> None:
        """Place the ball at (x, y) with the given size and stop it."""
        self.x = x
        self.y = y
        self.width = size
        self.height = size
        self.vx = 0.0
        self.vy = 0.0

    def hitbox(self) -> Hitbox:
        return Hitbox(self.x, self.y, self.x + self.width, self.y + self.height)

    def update(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt

    def render(self, surface: pygame.Surface) -> None:
        rect = pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))
        pygame.draw.rect(surface, WHITE, rect)