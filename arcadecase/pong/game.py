"""The rules and flow of a pong match."""

import enum
import random
from typing import Collection, Optional, Protocol

import pygame

from arcadecase.pong.ball import Ball
from arcadecase.pong.paddle import Paddle
from arcadecase.pong.settings import (
    BALL_SIZE,
    IA_PLAYER_1,
    IA_PLAYER_2,
    MAX_POINTS,
    MID_LINE_WIDTH,
    PADDLE_HEIGHT,
    PADDLE_SPEED,
    PADDLE_WIDTH,
    PADDLE_X_OFFSET,
    TABLE_HEIGHT,
    TABLE_WIDTH,
    WHITE,
)

_BALL_START = (TABLE_WIDTH // 2 - BALL_SIZE // 2, TABLE_HEIGHT // 2 - BALL_SIZE // 2, BALL_SIZE)


class SoundPlayer(Protocol):
    def play(self, name: str, pan: float) -> None: ...


class PongState(enum.Enum):
    START = enum.auto()
    SERVE = enum.auto()
    PLAY = enum.auto()
    DONE = enum.auto()


class Pong:
    """A two-player pong match.

    ``sounds`` needs a ``play(name, pan)`` method and may be omitted.
    """

    def __init__(
        self,
        sounds: Optional[SoundPlayer] = None,
        rng: Optional[random.Random] = None,
        ai_players: tuple = (IA_PLAYER_1, IA_PLAYER_2),
    ) -> None:
        self.player1 = Paddle(
            PADDLE_X_OFFSET, TABLE_HEIGHT // 2, PADDLE_WIDTH, PADDLE_HEIGHT, ai_players[0]
        )
        self.player2 = Paddle(
            TABLE_WIDTH - PADDLE_WIDTH - PADDLE_X_OFFSET,
            TABLE_HEIGHT // 2,
            PADDLE_WIDTH,
            PADDLE_HEIGHT,
            ai_players[1],
        )
        self.ball = Ball(*_BALL_START)
        self.state = PongState.START
        self.player1_score = 0
        self.player2_score = 0
        self.serving_player = 0
        self.winning_player = 0
        self.sounds = sounds
        self.rng = rng if rng is not None else random.Random()

    def _play(self, name: str, pan: float) -> None:
        if self.sounds is not None:
            self.sounds.play(name, pan)

    @staticmethod
    def _steer(paddle: Paddle, pressed: Collection[int], down: int, up: int) -> None:
        if paddle.ai:
            return
        if down in pressed:
            paddle.vy = PADDLE_SPEED
        elif up in pressed:
            paddle.vy = -PADDLE_SPEED
        else:
            paddle.vy = 0

    def handle_input(self, pressed: Collection[int]) -> None:
        """React to the set of pygame key codes currently held down."""
        enter = pygame.K_RETURN in pressed

        if self.state is PongState.START:
            if enter:
                self.state = PongState.SERVE
                self.serving_player = self.rng.randint(1, 2)
        elif self.state is PongState.SERVE:
            if enter:
                self.state = PongState.PLAY
                self.ball.vx = self.rng.randint(140, 199)
                if self.serving_player == 2:
                    self.ball.vx *= -1
                self.ball.vy = self.rng.randint(-50, 49)
        elif self.state is PongState.PLAY:
            self._steer(self.player1, pressed, pygame.K_s, pygame.K_w)
            self._steer(self.player2, pressed, pygame.K_DOWN, pygame.K_UP)
        elif enter:
            self.state = PongState.SERVE
            self.ball.reset(*_BALL_START)
            self.player1_score = 0
            self.player2_score = 0
            self.serving_player = 2 if self.winning_player == 1 else 1

    def _bounce_speed(self) -> int:
        speed = self.rng.randint(10, 149)
        return -speed if self.ball.vy < 0 else speed

    def update(self, dt: float) -> None:
        """Advance the match by ``dt`` seconds while it is being played."""
        if self.state is not PongState.PLAY:
            return

        self.player1.ai_movement(self.ball)
        self.player2.ai_movement(self.ball)
        self.player1.update(dt)
        self.player2.update(dt)
        self.ball.update(dt)

        ball_box = self.ball.hitbox()
        player1_box = self.player1.hitbox()
        player2_box = self.player2.hitbox()

        if ball_box.x1 > TABLE_WIDTH:
            self._play("score", 1.0)
            self.player1_score += 1
            self.serving_player = 2
            if self.player1_score == MAX_POINTS:
                self.winning_player = 1
                self.state = PongState.DONE
            else:
                self.state = PongState.SERVE
                self.ball.reset(*_BALL_START)
        elif ball_box.x2 < 0:
            self._play("score", -1.0)
            self.player2_score += 1
            self.serving_player = 1
            if self.player2_score == MAX_POINTS:
                self.winning_player = 2
                self.state = PongState.DONE
            else:
                self.state = PongState.SERVE
                self.ball.reset(*_BALL_START)

        if ball_box.y1 <= 0:
            self._play("wall_hit", 0.0)
            self.ball.y = 0
            self.ball.vy *= -1
        elif ball_box.y2 >= TABLE_HEIGHT:
            self._play("wall_hit", 0.0)
            self.ball.y = TABLE_HEIGHT - self.ball.height
            self.ball.vy *= -1

        if ball_box.collides(player1_box):
            self._play("paddle_hit", -1.0)
            self.ball.x = player1_box.x2
            self.ball.vx *= -1.03
            self.ball.vy = self._bounce_speed()
        elif ball_box.collides(player2_box):
            self._play("paddle_hit", 1.0)
            self.ball.x = player2_box.x1 - self.ball.width
            self.ball.vx *= -1.03
            self.ball.vy = self._bounce_speed()

    @staticmethod
    def _draw_centered(surface: pygame.Surface, font, x: float, y: float, text: str) -> None:
        image = font.render(text, False, WHITE)
        surface.blit(image, (int(x - image.get_width() / 2), int(y)))

    def render(self, surface: pygame.Surface, fonts) -> None:
        """Draw the table; ``fonts`` has ``large_font`` and ``score_font``."""
        half_width = TABLE_WIDTH // 2
        line = pygame.Rect(
            half_width - MID_LINE_WIDTH // 2, 0, MID_LINE_WIDTH, TABLE_HEIGHT
        )
        pygame.draw.rect(surface, WHITE, line)
        self.player1.render(surface)
        self.player2.render(surface)
        self.ball.render(surface)

        score_y = TABLE_HEIGHT // 6
        self._draw_centered(surface, fonts.score_font, half_width - 50, score_y, str(self.player1_score))
        self._draw_centered(surface, fonts.score_font, half_width + 50, score_y, str(self.player2_score))

        middle_y = TABLE_HEIGHT // 2
        if self.state is PongState.START:
            self._draw_centered(surface, fonts.large_font, half_width, middle_y, "Press enter to start")
        elif self.state is PongState.SERVE:
            self._draw_centered(surface, fonts.large_font, half_width, middle_y, "Press enter to serve")
        elif self.state is PongState.DONE:
            self._draw_centered(
                surface,
                fonts.large_font,
                half_width,
                TABLE_HEIGHT // 3,
                f"Player {self.winning_player} won!",
            )
            self._draw_centered(surface, fonts.large_font, half_width, middle_y, "Press enter to restart")