import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from arcadecase.flappy.bird import Bird, Rect
from arcadecase.flappy.settings import GRAVITY, JUMP_TAKEOFF_SPEED, Assets

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def test_rect_edges():
    rect = Rect(1.5, 2.0, 3.0, 4.0)
    assert rect.right == pytest.approx(4.5)
    assert rect.bottom == pytest.approx(6.0)


def test_rect_overlap_and_touching():
    a = Rect(0, 0, 10, 10)
    assert a.intersects(Rect(5, 5, 10, 10))
    assert not a.intersects(Rect(10, 0, 5, 5))
    assert not a.intersects(Rect(0, 20, 5, 5))


def test_collision_rect_follows_position():
    bird = Bird(100, 50, 39, 28)
    assert bird.collision_rect() == Rect(100, 50, 39, 28)


def test_gravity_pulls_down():
    bird = Bird(0, 100, 39, 28)
    bird.update(0.5)
    assert bird.vy == pytest.approx(GRAVITY * 0.5)
    assert bird.y > 100


def test_jump_sets_takeoff_speed_once():
    jump = FakeSound()
    bird = Bird(0, 100, 39, 28, Assets(sounds={"jump": jump}))
    bird.jump()
    bird.update(0.1)
    assert bird.vy == pytest.approx(-JUMP_TAKEOFF_SPEED)
    assert bird.y < 100
    assert jump.plays == 1
    bird.update(0.1)
    assert jump.plays == 1
    assert bird.vy > -JUMP_TAKEOFF_SPEED


def test_render_draws_texture_at_position():
    texture = pygame.Surface((5, 5))
    texture.fill(RED)
    target = pygame.Surface((50, 50))
    target.fill(BLACK)
    Bird(10, 20, 5, 5, Assets(textures={"bird": texture})).render(target)
    assert tuple(target.get_at((10, 20))) == RED
    assert tuple(target.get_at((9, 20))) == BLACK