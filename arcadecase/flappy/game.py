"""The flappy game: its screens and the virtual canvas they are drawn on."""

from typing import Optional

import pygame

from arcadecase.flappy.settings import VIRTUAL_HEIGHT, VIRTUAL_WIDTH, Assets
from arcadecase.flappy.states import (
    CountDownState,
    PauseState,
    PlayingState,
    StateMachine,
    TitleScreenState,
)

BACKGROUND_COLOR = (0, 0, 0)


class Game:
    """Runs the screens of the game on a small canvas scaled up to the window."""

    def __init__(self, assets: Optional[Assets] = None) -> None:
        self.assets = assets
        self.surface = pygame.Surface((VIRTUAL_WIDTH, VIRTUAL_HEIGHT))
        self.state_machine = StateMachine(
            {
                "title": TitleScreenState,
                "count_down": CountDownState,
                "playing": PlayingState,
                "pause": PauseState,
            },
            assets,
        )
        self.state_machine.change_state("title")
        if assets is not None:
            assets.play_music()

    @property
    def current_state(self):
        return self.state_machine.current_state

    def handle_input(self, event) -> None:
        self.state_machine.handle_input(event)

    def update(self, dt: float) -> None:
        self.state_machine.update(dt)

    def render(self, window: pygame.Surface) -> None:
        """Draw the current screen and scale it onto ``window``."""
        self.surface.fill(BACKGROUND_COLOR)
        self.state_machine.render(self.surface)
        pygame.transform.scale(self.surface, window.get_size(), window)