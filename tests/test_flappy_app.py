import pygame
import pytest

from arcadecase.flappy.app import _handle_event, main, run
from arcadecase.flappy.game import Game
from arcadecase.flappy.settings import AssetError
from arcadecase.flappy.states import CountDownState, TitleScreenState


def test_run_without_assets_fails(tmp_path):
    with pytest.raises(AssetError, match="Error loading texture graphics/bird.png"):
        run(tmp_path)


def test_main_passes_asset_dir(tmp_path):
    with pytest.raises(AssetError, match="graphics/bird.png"):
        main(["--assets", str(tmp_path)])


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2


def test_quit_event_stops():
    game = Game()
    assert _handle_event(game, pygame.event.Event(pygame.QUIT)) is False


def test_escape_stops_without_reaching_game():
    game = Game()
    title = game.current_state
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    assert _handle_event(game, event) is False
    assert game.current_state is title


def test_key_press_reaches_game():
    game = Game()
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN)
    assert _handle_event(game, event) is True
    assert isinstance(game.current_state, CountDownState)


def test_key_release_is_ignored():
    game = Game()
    event = pygame.event.Event(pygame.KEYUP, key=pygame.K_RETURN)
    assert _handle_event(game, event) is True
    assert isinstance(game.current_state, TitleScreenState)