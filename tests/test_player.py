import random

import pytest

from jungle_gun.player import Player
from jungle_gun import settings


def test_starts_on_the_ground():
    p = Player()
    assert p.x == settings.PLAYER_START_X
    assert p.bottom == settings.GROUND_Y
    assert p.on_ground
    assert p.facing == 1


def test_left_moves_and_faces_left():
    p = Player(120)
    p.update(left=True)
    assert p.x == pytest.approx(115.8)
    assert p.facing == -1


def test_left_wins_when_both_held():
    p = Player(120)
    p.update(left=True, right=True)
    assert p.vel.x == -settings.PLAYER_SPEED
    assert p.facing == -1


def test_facing_kept_after_release():
    p = Player(120)
    p.update(left=True)
    p.update()
    assert p.vel.x == 0
    assert p.facing == -1


def test_ground_snap():
    p = Player(120)
    p.update()
    assert p.bottom == settings.GROUND_Y
    assert p.vel.y == 0
    assert p.on_ground


def test_jump_only_from_ground():
    p = Player(120)
    start_y = p.y
    assert p.jump()
    assert p.vel.y == -settings.JUMP_SPEED
    assert not p.on_ground
    assert not p.jump()

    p.update()
    assert p.y == pytest.approx(start_y - settings.JUMP_SPEED + settings.GRAVITY)
    assert not p.on_ground


def test_jump_lands_again():
    p = Player(120)
    p.jump()
    for _ in range(60):
        p.update()
    assert p.on_ground
    assert p.bottom == settings.GROUND_Y


def test_x_clamped_to_world():
    p = Player(0)
    p.update(left=True)
    assert p.x == 0

    p = Player(settings.WORLD_WIDTH - settings.PLAYER_WIDTH)
    p.update(right=True)
    assert p.x == settings.WORLD_WIDTH - settings.PLAYER_WIDTH


def test_shoot_cooldown_counts_down_to_zero():
    p = Player()
    p.weapon.cooldown = 2
    p.update()
    assert p.shoot_cooldown == 1
    p.update()
    p.update()
    assert p.shoot_cooldown == 0


def test_random_input_stays_in_bounds():
    rng = random.Random(7)
    p = Player()
    for _ in range(2000):
        if rng.random() < 0.1:
            p.jump()
        p.update(left=rng.random() < 0.4, right=rng.random() < 0.5)
        assert 0 <= p.x <= settings.WORLD_WIDTH - p.w
        assert p.bottom <= settings.GROUND_Y


def test_rect_follows_position():
    p = Player(120)
    p.update(right=True)
    assert p.rect.topleft == pytest.approx((124.2, p.y))
    assert p.rect.size == (settings.PLAYER_WIDTH, settings.PLAYER_HEIGHT)
