# player.py
# The player runs on a flat ground plane:
# - left/right held flags drive horizontal speed (left wins if both are held)
# - gravity every frame, snap to the ground line
# - jump only from the ground

from __future__ import annotations
import pygame
from .utils import clamp
from .weapon import Bullet, Weapon
from . import settings


class Player(pygame.sprite.Sprite):
    def __init__(self, x: float = settings.PLAYER_START_X):
        super().__init__()
        self.w = settings.PLAYER_WIDTH
        self.h = settings.PLAYER_HEIGHT

        # Float position of the top-left corner; rect follows it
        self.pos = pygame.Vector2(x, settings.GROUND_Y - self.h)
        self.rect = pygame.FRect(self.pos.x, self.pos.y, self.w, self.h)

        # Physics
        self.vel = pygame.Vector2(0.0, 0.0)
        self.speed = settings.PLAYER_SPEED
        self.on_ground = True
        self.facing = 1

        # Combat
        self.weapon = Weapon()

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    @property
    def bottom(self) -> float:
        return self.pos.y + self.h

    @property
    def shoot_cooldown(self) -> int:
        return self.weapon.cooldown

    # --------------------------
    # Actions
    # --------------------------

    def jump(self) -> bool:
        """Start a jump. Ignored in the air, so a second press can't double jump."""
        if not self.on_ground:
            return False
        self.vel.y = -settings.JUMP_SPEED
        self.on_ground = False
        return True

    def try_shoot(self, bullets: pygame.sprite.Group) -> Bullet | None:
        if self.facing > 0:
            muzzle_x = self.pos.x + self.w
        else:
            muzzle_x = self.pos.x - settings.BULLET_BACK_OFFSET
        muzzle = pygame.Vector2(muzzle_x, self.pos.y + settings.BULLET_Y_OFFSET)
        return self.weapon.shoot(bullets, muzzle, self.facing)

    # --------------------------
    # Update
    # --------------------------

    def handle_input(self, left: bool, right: bool) -> None:
        if left:
            self.vel.x = -self.speed
            self.facing = -1
        elif right:
            self.vel.x = self.speed
            self.facing = 1
        else:
            self.vel.x = 0.0

    def update(self, left: bool = False, right: bool = False) -> None:
        self.handle_input(left, right)

        self.pos.x += self.vel.x
        self.vel.y += settings.GRAVITY
        self.pos.y += self.vel.y

        if self.bottom >= settings.GROUND_Y:
            self.pos.y = settings.GROUND_Y - self.h
            self.vel.y = 0.0
            self.on_ground = True
        else:
            self.on_ground = False

        self.pos.x = clamp(self.pos.x, 0, settings.WORLD_WIDTH - self.w)
        self.rect.topleft = (self.pos.x, self.pos.y)
        self.weapon.update()
