"""Window, assets and main loop of the pong game."""

import argparse
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence, Union

import pygame

from arcadecase.pong.game import Pong
from arcadecase.pong.settings import (
    BLACK,
    FPS,
    TABLE_HEIGHT,
    TABLE_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)

PathLike = Union[str, Path]

LARGE_FONT_SIZE = 16
SCORE_FONT_SIZE = 32
SOUND_NAMES = ("paddle_hit", "wall_hit", "score")
_WATCHED_KEYS = (pygame.K_RETURN, pygame.K_w, pygame.K_s, pygame.K_UP, pygame.K_DOWN)


@dataclass(frozen=True)
class Fonts:
    """The two fonts the table is drawn with."""

    large_font: Any
    score_font: Any


def _require(path: Path, relative: str) -> Path:
    if not path.is_file():
        raise FileNotFoundError(f"Error loading {relative}")
    return path


def load_fonts(asset_dir: PathLike = ".") -> Fonts:
    """Load the message and score fonts from ``fonts/font.ttf``."""
    path = _require(Path(asset_dir) / "fonts" / "font.ttf", "fonts/font.ttf")
    if not pygame.font.get_init():
        pygame.font.init()
    return Fonts(
        large_font=pygame.font.Font(str(path), LARGE_FONT_SIZE),
        score_font=pygame.font.Font(str(path), SCORE_FONT_SIZE),
    )


@dataclass(frozen=True)
class Sounds:
    """The sound effects of a match."""

    paddle_hit: Any
    wall_hit: Any
    score: Any

    def play(self, name: str, pan: float = 0.0) -> None:
        """Play a sample once; ``pan`` runs from -1 (left) to 1 (right)."""
        samples = {"paddle_hit": self.paddle_hit, "wall_hit": self.wall_hit, "score": self.score}
        try:
            sample = samples[name]
        except KeyError:
            raise KeyError(f"unknown sound: {name}") from None
        channel = sample.play()
        if channel is not None:
            channel.set_volume(min(1.0, 1.0 - pan), min(1.0, 1.0 + pan))


def load_sounds(asset_dir: PathLike = ".") -> Sounds:
    """Load the sound effects from the ``sounds`` directory."""
    root = Path(asset_dir) / "sounds"
    paths = {name: _require(root / f"{name}.wav", f"sounds/{name}.wav") for name in SOUND_NAMES}
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    pygame.mixer.set_num_channels(len(SOUND_NAMES))
    return Sounds(**{name: pygame.mixer.Sound(str(path)) for name, path in paths.items()})


def _held_keys() -> set:
    state = pygame.key.get_pressed()
    return {key for key in _WATCHED_KEYS if state[key]}


def run(asset_dir: PathLike = ".") -> None:
    """Open the window and play until it is closed."""
    fonts = load_fonts(asset_dir)
    sounds = load_sounds(asset_dir)
    pygame.init()
    try:
        display = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Pong")
        table = pygame.Surface((TABLE_WIDTH, TABLE_HEIGHT))
        clock = pygame.time.Clock()
        pong = Pong(sounds)
        last_frame = time.perf_counter()
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    pong.handle_input(_held_keys())
            if not running:
                break

            now = time.perf_counter()
            pong.update(now - last_frame)
            last_frame = now

            table.fill(BLACK)
            pong.render(table, fonts)
            pygame.transform.scale(table, display.get_size(), display)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="pong", description="Play pong.")
    parser.add_argument(
        "--assets", default=".", help="directory holding the fonts and sounds directories"
    )
    args = parser.parse_args(argv)
    run(args.assets)
    return 0