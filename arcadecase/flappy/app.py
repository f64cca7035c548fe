"""Window and main loop of the flappy game."""

import argparse
import time
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from arcadecase.flappy.game import Game
from arcadecase.flappy.settings import WINDOW_HEIGHT, WINDOW_WIDTH, load_assets

PathLike = Union[str, Path]


def _handle_event(game: Game, event) -> bool:
    """Pass an event to the game; return False when the window should close."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN and getattr(event, "key", None) == pygame.K_ESCAPE:
        return False
    if event.type in (pygame.MOUSEBUTTONDOWN, pygame.KEYDOWN):
        game.handle_input(event)
    return True


def run(asset_dir: PathLike = ".") -> None:
    """Load the media files, open the window and play until it is closed."""
    assets = load_assets(asset_dir)
    pygame.init()
    try:
        window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Flappy Bird")
        game = Game(assets)
        dt = 0.0
        last_frame = time.perf_counter()
        running = True

        while running:
            for event in pygame.event.get():
                if not _handle_event(game, event):
                    running = False
                    break
            if not running:
                break

            game.update(dt)
            game.render(window)
            pygame.display.flip()

            now = time.perf_counter()
            dt = now - last_frame
            last_frame = now
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="flappy", description="Play flappy bird.")
    parser.add_argument(
        "--assets",
        default=".",
        help="directory holding the graphics, sounds and fonts directories",
    )
    args = parser.parse_args(argv)
    run(args.assets)
    return 0