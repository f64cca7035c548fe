import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from arcadecase.flappy.bird import Rect
from arcadecase.flappy.logs import Log, LogPair
from arcadecase.flappy.settings import LOG_HEIGHT, LOG_WIDTH, LOGS_GAP, MAIN_SCROLL_SPEED, Assets

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)


def test_upright_log_rect():
    log = Log(10, 100, False)
    assert log.collision_rect() == Rect(10, 100, LOG_WIDTH, LOG_HEIGHT)
    log.update(30)
    assert log.collision_rect().left == 30


def test_inverted_log_rect_after_update():
    log = Log(0, 150, True)
    log.update(30)
    assert log.collision_rect() == Rect(30, 150 - LOG_HEIGHT, LOG_WIDTH, LOG_HEIGHT)


def test_pair_rects_leave_gap():
    pair = LogPair(100, -200)
    pair.update(0)
    assert pair.top.collision_rect() == Rect(100, -200, LOG_WIDTH, LOG_HEIGHT)
    assert pair.bottom.collision_rect() == Rect(100, -200 + LOGS_GAP + LOG_HEIGHT, LOG_WIDTH, LOG_HEIGHT)


def test_pair_collisions():
    pair = LogPair(100, -200)
    pair.update(0)
    gap_top = -200 + LOG_HEIGHT
    assert not pair.collides(Rect(110, gap_top + 10, 10, 10))
    assert pair.collides(Rect(110, gap_top + LOGS_GAP - 5, 10, 10))
    assert pair.collides(Rect(110, gap_top - 5, 10, 10))
    assert not pair.collides(Rect(110, gap_top + LOGS_GAP - 10, 10, 10))


def test_pair_scrolls_left():
    pair = LogPair(200, -100)
    pair.update(0.5)
    assert pair.x == pytest.approx(200 - MAIN_SCROLL_SPEED * 0.5)
    assert pair.bottom.x == pytest.approx(pair.x)


def test_out_of_game():
    assert LogPair(-LOG_WIDTH - 1, 0).is_out_of_game()
    assert not LogPair(-LOG_WIDTH, 0).is_out_of_game()


def test_scored_only_once_and_reset():
    pair = LogPair(0, 0)
    behind = Rect(0, 0, 10, 10)
    past = Rect(LOG_WIDTH + 1, 0, 10, 10)
    assert not pair.update_scored(behind)
    assert pair.update_scored(past)
    assert not pair.update_scored(past)
    pair.reset(0, 0)
    assert pair.update_scored(past)


def test_render_upright_and_inverted():
    texture = pygame.Surface((int(LOG_WIDTH), int(LOG_HEIGHT)))
    texture.fill(RED)
    assets = Assets(textures={"log": texture})
    target = pygame.Surface((512, 288))
    target.fill(BLACK)

    upright = Log(10, 200, False, assets)
    upright.update(10)
    upright.render(target)
    assert tuple(target.get_at((10, 200))) == RED
    assert tuple(target.get_at((9, 200))) == BLACK

    inverted = Log(0, 150, True, assets)
    inverted.update(200)
    inverted.render(target)
    assert tuple(target.get_at((200, 149))) == RED
    assert tuple(target.get_at((200, 150))) == BLACK