# collisions.py
# Player vs enemies, then enemies vs bullets. Groups keep insertion order,
# so scans run in spawn/fire order and the first match wins.

from __future__ import annotations
from typing import TYPE_CHECKING
import pygame
from .utils import overlaps

if TYPE_CHECKING:
    from .enemies import Enemy
    from .player import Player


def find_player_hit(player: Player, enemies: pygame.sprite.Group) -> Enemy | None:
    """First enemy touching the player, if any."""
    return pygame.sprite.spritecollideany(player, enemies, collided=overlaps)


def resolve_bullet_hits(enemies: pygame.sprite.Group, bullets: pygame.sprite.Group) -> int:
    """
    Match each enemy with the first bullet touching it and kill both.

    A bullet is used up by one enemy and an enemy takes at most one bullet,
    so each kill is credited once. Returns the kill count.
    """
    kills = 0
    for enemy in list(enemies):
        # Group iteration copies, so bullets killed above are already gone.
        for bullet in bullets:
            if overlaps(enemy, bullet):
                bullet.kill()
                enemy.kill()
                kills += 1
                break
    return kills
