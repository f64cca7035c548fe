"""Axis-aligned boxes used for collision checks."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Hitbox:
    """A box spanning from (x1, y1) to (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float

    def collides(self, other: "Hitbox") -> bool:
        """Return True when the boxes overlap or touch."""
        if self.x1 > other.x2 or other.x1 > self.x2:
            return False
        if self.y1 > other.y2 or other.y1 > self.y2:
            return False
        return True