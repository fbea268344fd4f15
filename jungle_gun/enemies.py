# enemies.py
from __future__ import annotations
import logging
import random
import pygame
from . import settings

logger = logging.getLogger(__name__)


class Enemy(pygame.sprite.Sprite):
    """Ground walker that heads left at a constant speed."""
    def __init__(self, pos: tuple[float, float], speed: float):
        super().__init__()
        self.pos = pygame.Vector2(pos)
        self.w = settings.ENEMY_WIDTH
        self.h = settings.ENEMY_HEIGHT
        self.rect = pygame.FRect(self.pos.x, self.pos.y, self.w, self.h)
        self.vel = pygame.Vector2(-abs(speed), 0.0)

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    def is_behind(self, camera_x: float) -> bool:
        """True once the enemy has walked far enough off the left of the view."""
        return self.pos.x + self.w <= camera_x - settings.ENEMY_CULL_MARGIN

    def update(self, camera_x: float) -> None:
        self.pos.x += self.vel.x
        self.rect.x = self.pos.x

        # walked out behind the camera
        if self.is_behind(camera_x):
            self.kill()


class EnemySpawner:
    """
    Drops a new enemy just past the right edge of the view every
    SPAWN_MIN_FRAMES..SPAWN_MAX_FRAMES frames.

    Pass a seeded random.Random for reproducible runs.
    """
    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()
        self.countdown = 0

    def reset(self) -> None:
        self.countdown = 0

    def spawn(self, camera_x: float, view_width: float) -> Enemy:
        x = camera_x + view_width + settings.ENEMY_SPAWN_MARGIN + self.rng.random() * settings.ENEMY_SPAWN_JITTER
        x = min(x, settings.WORLD_WIDTH - settings.ENEMY_SPAWN_EDGE)
        speed = settings.ENEMY_MIN_SPEED + self.rng.random() * settings.ENEMY_SPEED_RANGE
        return Enemy((x, settings.GROUND_Y - settings.ENEMY_HEIGHT), speed)

    def update(self, camera_x: float, view_width: float, enemies: pygame.sprite.Group) -> Enemy | None:
        self.countdown -= 1
        if self.countdown > 0:
            return None

        enemy = self.spawn(camera_x, view_width)
        enemies.add(enemy)
        self.countdown = self.rng.randint(settings.SPAWN_MIN_FRAMES, settings.SPAWN_MAX_FRAMES)
        logger.debug("Spawned enemy at x=%.1f vx=%.2f (next in %d frames)", enemy.x, enemy.vel.x, self.countdown)
        return enemy
