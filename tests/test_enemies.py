import random

import pygame
import pytest

from jungle_gun.enemies import EnemySpawner
from jungle_gun import settings

from conftest import ground_enemy


def test_enemy_walks_left():
    e = ground_enemy(1000, speed=1.2)
    for _ in range(10):
        e.update(0)
    assert e.x == pytest.approx(988)
    assert e.y == settings.GROUND_Y - settings.ENEMY_HEIGHT


def test_enemy_behind_camera():
    e = ground_enemy(0)
    # right edge at 34; culled once it is 100 behind the camera
    assert not e.is_behind(133)
    assert e.is_behind(134)


def test_spawner_fires_on_first_update():
    spawner = EnemySpawner(random.Random(3))
    enemies = pygame.sprite.Group()
    enemy = spawner.update(0, 960, enemies)
    assert enemies.sprites() == [enemy]
    assert settings.SPAWN_MIN_FRAMES <= spawner.countdown <= settings.SPAWN_MAX_FRAMES


def test_spawner_waits_for_countdown():
    spawner = EnemySpawner(random.Random(3))
    spawner.countdown = 3
    enemies = pygame.sprite.Group()
    assert spawner.update(0, 960, enemies) is None
    assert spawner.update(0, 960, enemies) is None
    assert spawner.update(0, 960, enemies) is not None
    assert len(enemies) == 1


def test_spawn_position_and_speed_ranges():
    spawner = EnemySpawner(random.Random(11))
    for _ in range(200):
        e = spawner.spawn(500, 960)
        assert 500 + 960 + 80 <= e.x <= 500 + 960 + 80 + 300
        assert e.y == settings.GROUND_Y - settings.ENEMY_HEIGHT
        assert -2.4 <= e.vel.x <= -1.2


def test_spawn_clamped_to_world_edge():
    spawner = EnemySpawner(random.Random(5))
    for _ in range(50):
        e = spawner.spawn(settings.WORLD_WIDTH - 960, 960)
        assert e.x == settings.WORLD_WIDTH - settings.ENEMY_SPAWN_EDGE
        assert e.x + e.w <= settings.WORLD_WIDTH


def test_same_seed_same_spawns():
    a = EnemySpawner(random.Random(42))
    b = EnemySpawner(random.Random(42))
    assert [a.spawn(0, 960).x for _ in range(5)] == [b.spawn(0, 960).x for _ in range(5)]


def test_enemy_kills_itself_behind_camera():
    enemies = pygame.sprite.Group()
    e = ground_enemy(0, speed=1.2)
    enemies.add(e)
    enemies.update(135)
    # right edge now at 32.8, camera - margin is 35
    assert not e.alive()
    assert len(enemies) == 0
