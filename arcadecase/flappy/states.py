"""Screens of the flappy game and the machine that switches between them."""

from typing import Callable, Dict, Mapping, Optional

import pygame

from arcadecase.flappy.bird import Bird
from arcadecase.flappy.settings import (
    BIRD_HEIGHT,
    BIRD_WIDTH,
    FLAPPY_TEXT_SIZE,
    HUGE_TEXT_SIZE,
    MEDIUM_TEXT_SIZE,
    VIRTUAL_HEIGHT,
    VIRTUAL_WIDTH,
    Assets,
)
from arcadecase.flappy.text import WHITE, render_text
from arcadecase.flappy.world import World


class BaseState:
    """A screen that does nothing; concrete screens override what they need."""

    def __init__(self, state_machine: "StateMachine") -> None:
        self.state_machine = state_machine

    @property
    def assets(self) -> Optional[Assets]:
        return self.state_machine.assets

    def _play(self, name: str) -> None:
        if self.assets is not None:
            self.assets.play(name)

    def _text(self, target, x, y, text, size, font_name, center=False) -> None:
        font = self.assets.fonts.get(font_name) if self.assets is not None else None
        render_text(target, x, y, text, size, font, WHITE, center)

    def enter(self, world=None, bird=None, score=0) -> None:
        pass

    def exit(self) -> None:
        pass

    def handle_input(self, event) -> None:
        pass

    def update(self, dt: float) -> None:
        pass

    def render(self, target: pygame.Surface) -> None:
        pass


StateBuilder = Callable[["StateMachine"], BaseState]


class StateMachine:
    """Holds the current screen and builds new ones by name."""

    def __init__(
        self, states: Optional[Mapping[str, StateBuilder]] = None, assets: Optional[Assets] = None
    ) -> None:
        self.states: Dict[str, StateBuilder] = dict(states or {})
        self.assets = assets
        self.current_state: BaseState = BaseState(self)

    def change_state(self, name: str, world=None, bird=None, score: int = 0) -> None:
        """Switch to the named screen; an unknown name leaves things as they are."""
        builder = self.states.get(name)
        if builder is None:
            return
        self.current_state.exit()
        self.current_state = builder(self)
        self.current_state.enter(world, bird, score)

    def handle_input(self, event) -> None:
        self.current_state.handle_input(event)

    def update(self, dt: float) -> None:
        self.current_state.update(dt)

    def render(self, target: pygame.Surface) -> None:
        self.current_state.render(target)


def _is_key(event, key: int) -> bool:
    return event.type == pygame.KEYDOWN and getattr(event, "key", None) == key


class TitleScreenState(BaseState):
    """The title screen, waiting for Enter."""

    def __init__(self, state_machine: StateMachine) -> None:
        super().__init__(state_machine)
        self.world = World(assets=state_machine.assets)

    def handle_input(self, event) -> None:
        if _is_key(event, pygame.K_RETURN):
            self.state_machine.change_state("count_down")

    def update(self, dt: float) -> None:
        self.world.update(dt)

    def render(self, target: pygame.Surface) -> None:
        self.world.render(target)
        self._text(
            target, VIRTUAL_WIDTH // 2, VIRTUAL_HEIGHT // 3, "Flappy Bird",
            FLAPPY_TEXT_SIZE, "flappy", center=True,
        )
        self._text(
            target, VIRTUAL_WIDTH // 2, 2 * VIRTUAL_HEIGHT // 3, "Press Enter to start",
            MEDIUM_TEXT_SIZE, "font", center=True,
        )


class CountDownState(BaseState):
    """Counts down a few seconds over a fresh world before play starts."""

    def __init__(self, state_machine: StateMachine) -> None:
        super().__init__(state_machine)
        self.world: Optional[World] = None
        self.counter = 3
        self.timer = 0.0

    def enter(self, world=None, bird=None, score=0) -> None:
        self.world = World(False, self.assets)

    def update(self, dt: float) -> None:
        self.timer += dt
        if self.timer >= 1.0:
            self.timer = 0.0
            self.counter -= 1
            if self.counter == 0:
                self.state_machine.change_state("playing", self.world)
        self.world.update(dt)

    def render(self, target: pygame.Surface) -> None:
        self.world.render(target)
        self._text(
            target, VIRTUAL_WIDTH // 2, VIRTUAL_HEIGHT // 2, str(self.counter),
            HUGE_TEXT_SIZE, "font", center=True,
        )


class PlayingState(BaseState):
    """The bird flies, scores and crashes."""

    def __init__(self, state_machine: StateMachine) -> None:
        super().__init__(state_machine)
        self.world: Optional[World] = None
        self.bird: Optional[Bird] = None
        self.score = 0

    def enter(self, world=None, bird=None, score=0) -> None:
        if world is None:
            raise ValueError("the playing state needs a world")
        self.world = world
        self.score = score
        self.world.reset(True)
        if bird is None:
            bird = Bird(
                VIRTUAL_WIDTH // 2 - BIRD_WIDTH / 2,
                VIRTUAL_HEIGHT // 2 - BIRD_HEIGHT / 2,
                BIRD_WIDTH,
                BIRD_HEIGHT,
                self.assets,
            )
        self.bird = bird

    def handle_input(self, event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", None) == 1:
            self.bird.jump()
        elif _is_key(event, pygame.K_p):
            self.state_machine.change_state("pause", self.world, self.bird, self.score)

    def update(self, dt: float) -> None:
        self.bird.update(dt)
        self.world.update(dt)

        if self.world.collides(self.bird.collision_rect()):
            self._play("explosion")
            self._play("hurt")
            self.state_machine.change_state("count_down")

        if self.world.update_scored(self.bird.collision_rect()):
            self.score += 1
            self._play("score")

    def render(self, target: pygame.Surface) -> None:
        self.world.render(target)
        self.bird.render(target)
        self._text(target, 20, 10, f"Score: {self.score}", FLAPPY_TEXT_SIZE, "flappy")


class PauseState(BaseState):
    """Freezes the game until P is pressed again."""

    def __init__(self, state_machine: StateMachine) -> None:
        super().__init__(state_machine)
        self.world: Optional[World] = None
        self.bird: Optional[Bird] = None
        self.score = 0

    def enter(self, world=None, bird=None, score=0) -> None:
        self.world = world
        self.bird = bird
        self.score = score

    def handle_input(self, event) -> None:
        if _is_key(event, pygame.K_p):
            self.state_machine.change_state("playing", self.world, self.bird, self.score)

    def update(self, dt: float) -> None:
        self.world.update(0.0)
        self.bird.update(0.0)

    def render(self, target: pygame.Surface) -> None:
        self.world.render(target)
        self.bird.render(target)
        self._text(
            target, VIRTUAL_WIDTH // 2, VIRTUAL_HEIGHT // 2,
            "Game paused\npress 'P' to continue", FLAPPY_TEXT_SIZE, "flappy", center=True,
        )