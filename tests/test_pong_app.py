import os
import shutil

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from arcadecase.pong.app import Sounds, load_fonts, load_sounds, main


class FakeChannel:
    def __init__(self):
        self.volume = None

    def set_volume(self, left, right):
        self.volume = (left, right)


class FakeSample:
    def __init__(self, free=True):
        self.plays = 0
        self.free = free
        self.channel = FakeChannel()

    def play(self):
        self.plays += 1
        return self.channel if self.free else None


def make_sounds():
    return Sounds(paddle_hit=FakeSample(), wall_hit=FakeSample(), score=FakeSample())


def test_play_centre_uses_both_sides():
    sounds = make_sounds()
    sounds.play("wall_hit", 0.0)
    assert sounds.wall_hit.plays == 1
    assert sounds.wall_hit.channel.volume == (1.0, 1.0)
    assert sounds.score.plays == 0


def test_play_pans_left_and_right():
    sounds = make_sounds()
    sounds.play("paddle_hit", -1.0)
    left, right = sounds.paddle_hit.channel.volume
    assert left == 1.0
    assert right == 0.0
    sounds.play("score", 1.0)
    left, right = sounds.score.channel.volume
    assert left == 0.0
    assert right == 1.0


def test_play_without_free_channel_still_plays():
    sounds = Sounds(paddle_hit=FakeSample(free=False), wall_hit=FakeSample(), score=FakeSample())
    sounds.play("paddle_hit", 1.0)
    assert sounds.paddle_hit.plays == 1
    assert sounds.paddle_hit.channel.volume is None


def test_play_unknown_name():
    with pytest.raises(KeyError):
        make_sounds().play("explosion", 0.0)


def test_load_fonts_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="fonts/font.ttf"):
        load_fonts(tmp_path)


def test_load_fonts_sizes(tmp_path):
    source = os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())
    (tmp_path / "fonts").mkdir()
    shutil.copy(source, tmp_path / "fonts" / "font.ttf")
    fonts = load_fonts(tmp_path)
    assert fonts.score_font.get_height() > fonts.large_font.get_height()


def test_load_sounds_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="sounds/paddle_hit.wav"):
        load_sounds(tmp_path)


def test_main_without_assets_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["--assets", str(tmp_path)])