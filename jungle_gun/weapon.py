# weapon.py
# Weapon + Bullet classes, plus the mega blast.
#
# - A Weapon decides *when* the player may shoot (cooldown in frames).
# - A Bullet is a small box flying straight; no gravity.
# - MegaBlast clears every enemy on screen, on its own long cooldown.

from __future__ import annotations
import pygame
from . import settings


class Bullet(pygame.sprite.Sprite):
    def __init__(self, pos: pygame.Vector2, direction: int):
        super().__init__()
        self.pos = pygame.Vector2(pos)
        self.w = settings.BULLET_WIDTH
        self.h = settings.BULLET_HEIGHT
        self.rect = pygame.FRect(self.pos.x, self.pos.y, self.w, self.h)
        self.vel = pygame.Vector2(settings.BULLET_SPEED * direction, 0.0)

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    def in_view(self, camera_x: float, view_width: float) -> bool:
        margin = settings.BULLET_CULL_MARGIN
        return camera_x - margin < self.pos.x < camera_x + view_width + margin

    def update(self, camera_x: float, view_width: float) -> None:
        # move
        self.pos.x += self.vel.x
        self.rect.x = self.pos.x

        # despawn once it leaves the view (plus margin)
        if not self.in_view(camera_x, view_width):
            self.kill()


class Weapon:
    """Basic semi-auto weapon."""
    def __init__(self, cooldown_frames: int = settings.SHOOT_COOLDOWN_FRAMES):
        self.cooldown_frames = cooldown_frames
        self.cooldown = 0  # frames until the next shot is allowed

    def update(self) -> None:
        self.cooldown = max(0, self.cooldown - 1)

    def can_shoot(self) -> bool:
        return self.cooldown <= 0

    def shoot(self, bullets_group: pygame.sprite.Group, pos: pygame.Vector2, direction: int) -> Bullet | None:
        if not self.can_shoot():
            return None
        bullet = Bullet(pos, direction)
        bullets_group.add(bullet)
        self.cooldown = self.cooldown_frames
        return bullet


class MegaBlast:
    """
    Area clear attack.

    Kills every enemy touching the view (plus MEGA_MARGIN on both sides).
    A trigger always starts the cooldown and the screen flash, even when
    nothing was on screen. It does not share a cooldown with Weapon.
    """
    def __init__(self):
        self.cooldown = 0
        self.flash = 0

    def reset(self) -> None:
        self.cooldown = 0
        self.flash = 0

    def update(self) -> None:
        if self.cooldown > 0:
            self.cooldown -= 1
        if self.flash > 0:
            self.flash -= 1

    def ready(self) -> bool:
        return self.cooldown <= 0

    def fire(self, enemies: pygame.sprite.Group, camera_x: float, view_width: float) -> int | None:
        """Kill enemies on screen. Returns the kill count, or None if cooling down."""
        if not self.ready():
            return None

        left = camera_x - settings.MEGA_MARGIN
        right = camera_x + view_width + settings.MEGA_MARGIN
        killed = 0
        for e in list(enemies):
            if e.x + e.w >= left and e.x <= right:
                e.kill()
                killed += 1

        self.cooldown = settings.MEGA_COOLDOWN_FRAMES
        self.flash = settings.MEGA_FLASH_FRAMES
        return killed
