"""Pong paddles, driven by a player or by the computer."""

from dataclasses import dataclass

import pygame

from arcadecase.pong.ball import Ball
from arcadecase.pong.hitbox import Hitbox
from arcadecase.pong.settings import (
    BALL_SIZE,
    PADDLE_HEIGHT,
    PADDLE_SPEED,
    PADDLE_WIDTH,
    TABLE_HEIGHT,
    TABLE_WIDTH,
    WHITE,
)


@dataclass
class Paddle:
    """A vertical paddle; ``ai`` marks one steered by the computer."""

    x: float
    y: float
    width: float
    height: float
    ai: bool = False
    vy: float = 0.0

    def hitbox(self) -> Hitbox:
        return Hitbox(self.x, self.y, self.x + self.width, self.y + self.height)

    def ai_movement(self, ball: Ball) -> None:
        """Follow the ball while it comes this way, otherwise drift to the middle."""
        if not self.ai:
            return

        paddle_middle = self.y + self.height / 2
        ball_middle = ball.y + ball.height / 2
        half_width = TABLE_WIDTH // 2
        half_height = TABLE_HEIGHT // 2

        is_our_side = abs(ball.x + ball.width / 2 - self.x + self.width) < half_width
        is_ball_coming = (ball.vx < 0 and self.x < half_width) or (
            ball.vx > 0 and self.x > half_width
        )

        if is_our_side and is_ball_coming:
            difference = abs(ball_middle - paddle_middle)
            if difference <= BALL_SIZE:
                self.vy = 0
            elif ball_middle < paddle_middle:
                self.vy = -PADDLE_SPEED
            else:
                self.vy = PADDLE_SPEED
        elif not is_ball_coming:
            difference = abs(paddle_middle - half_height)
            if paddle_middle > half_height and difference > PADDLE_WIDTH:
                self.vy = -PADDLE_SPEED
            elif paddle_middle < half_height and difference > PADDLE_WIDTH:
                self.vy = PADDLE_SPEED
            else:
                self.vy = 0
        else:
            self.vy = 0

    def update(self, dt: float) -> None:
        """Move the paddle, keeping it on the table."""
        self.y += self.vy * dt
        self.y = max(0, min(self.y, TABLE_HEIGHT - PADDLE_HEIGHT))

    def render(self, surface: pygame.Surface) -> None:
        rect = pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))
        pygame.draw.rect(surface, WHITE, rect)