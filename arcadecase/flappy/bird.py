"""The bird and the rectangles used for its collisions."""

from dataclasses import dataclass
from typing import Optional

import pygame

from arcadecase.flappy.settings import GRAVITY, JUMP_TAKEOFF_SPEED, Assets


@dataclass(frozen=True)
class Rect:
    """A rectangle with floating-point position and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: "Rect") -> bool:
        """Return True when the rectangles share an area; touching edges do not count."""
        return (
            max(self.left, other.left) < min(self.right, other.right)
            and max(self.top, other.top) < min(self.bottom, other.bottom)
        )


class Bird:
    """The bird, pulled down by gravity and lifted by jumps."""

    def __init__(
        self, x: float, y: float, width: float, height: float, assets: Optional[Assets] = None
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.vy = 0.0
        self.jumping = False
        self.assets = assets

    def collision_rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def jump(self) -> None:
        """Ask for a jump on the next update."""
        self.jumping = True

    def update(self, dt: float) -> None:
        self.vy += GRAVITY * dt
        if self.jumping:
            if self.assets is not None:
                self.assets.play("jump")
            self.vy = -JUMP_TAKEOFF_SPEED
            self.jumping = False
        self.y += self.vy * dt

    def render(self, target: pygame.Surface) -> None:
        if self.assets is not None:
            target.blit(self.assets.textures["bird"], (int(self.x), int(self.y)))