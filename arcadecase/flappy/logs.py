"""The logs the bird must fly between."""

from typing import Optional

import pygame

from arcadecase.flappy.bird import Rect
from arcadecase.flappy.settings import LOG_HEIGHT, LOG_WIDTH, LOGS_GAP, MAIN_SCROLL_SPEED, Assets


class Log:
    """A single log; an inverted one hangs from above, turned upside down."""

    def __init__(self, x: float, y: float, inverted: bool, assets: Optional[Assets] = None) -> None:
        self.x = x
        self.y = y
        self.inverted = inverted
        self.assets = assets

    def collision_rect(self) -> Rect:
        if not self.inverted:
            return Rect(self.x, self.y, LOG_WIDTH, LOG_HEIGHT)
        return Rect(self.x - LOG_WIDTH, self.y - LOG_HEIGHT, LOG_WIDTH, LOG_HEIGHT)

    def update(self, x: float) -> None:
        """Move the log so that its left edge is at ``x``."""
        self.x = x + LOG_WIDTH if self.inverted else x

    def render(self, target: pygame.Surface) -> None:
        if self.assets is None:
            return
        texture = self.assets.textures["log"]
        if self.inverted:
            image = pygame.transform.rotate(texture, 180)
            position = (self.x - image.get_width(), self.y - image.get_height())
        else:
            image = texture
            position = (self.x, self.y)
        target.blit(image, (int(position[0]), int(position[1])))


class LogPair:
    """A top and a bottom log with a gap between them, scrolling left."""

    def __init__(self, x: float, y: float, assets: Optional[Assets] = None) -> None:
        self.x = x
        self.y = y
        self.top = Log(x, y + LOG_HEIGHT, True, assets)
        self.bottom = Log(x, y + LOGS_GAP + LOG_HEIGHT, False, assets)
        self.scored = False

    def collides(self, rect: Rect) -> bool:
        return self.top.collision_rect().intersects(rect) or self.bottom.collision_rect().intersects(
            rect
        )

    def update(self, dt: float) -> None:
        self.x += -MAIN_SCROLL_SPEED * dt
        self.top.update(self.x)
        self.bottom.update(self.x)

    def render(self, target: pygame.Surface) -> None:
        self.top.render(target)
        self.bottom.render(target)

    def is_out_of_game(self) -> bool:
        return self.x < -LOG_WIDTH

    def update_scored(self, rect: Rect) -> bool:
        """Return True the first time ``rect`` has passed the pair."""
        if self.scored:
            return False
        if rect.left > self.x + LOG_WIDTH:
            self.scored = True
            return True
        return False

    def reset(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.scored = False