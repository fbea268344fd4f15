import pygame

from jungle_gun.collisions import find_player_hit, resolve_bullet_hits
from jungle_gun.player import Player
from jungle_gun.weapon import Bullet

from conftest import ground_enemy


def bullet_at(x, y=420):
    return Bullet(pygame.Vector2(x, y), 1)


def test_player_hit_first_match():
    p = Player(120)
    far = ground_enemy(900)
    near = ground_enemy(130)
    assert find_player_hit(p, pygame.sprite.Group(far, near)) is near
    assert find_player_hit(p, pygame.sprite.Group(near, far)) is near
    assert find_player_hit(p, pygame.sprite.Group(far)) is None


def test_player_hit_uses_strict_edges():
    p = Player(120)
    touching = ground_enemy(120 + p.w)
    assert find_player_hit(p, pygame.sprite.Group(touching)) is None


def test_player_hit_picks_first_in_group_order():
    p = Player(120)
    first, second = ground_enemy(125), ground_enemy(130)
    assert find_player_hit(p, pygame.sprite.Group(first, second)) is first
    assert find_player_hit(p, pygame.sprite.Group(second, first)) is second


def test_one_kill_per_enemy_even_with_two_bullets():
    enemy = ground_enemy(600)
    first, second = bullet_at(605), bullet_at(610)
    enemies = pygame.sprite.Group(enemy)
    bullets = pygame.sprite.Group(first, second)

    kills = resolve_bullet_hits(enemies, bullets)

    assert kills == 1
    assert len(enemies) == 0
    assert bullets.sprites() == [second]
    assert not first.alive()
    assert not enemy.alive()


def test_bullet_used_once():
    a, b = ground_enemy(600), ground_enemy(610)
    enemies = pygame.sprite.Group(a, b)
    bullets = pygame.sprite.Group(bullet_at(615))

    assert resolve_bullet_hits(enemies, bullets) == 1
    assert enemies.sprites() == [b]
    assert len(bullets) == 0


def test_misses_keep_order():
    a, b, c = ground_enemy(100), ground_enemy(300), ground_enemy(500)
    live = bullet_at(1500)
    enemies = pygame.sprite.Group(a, b, c)
    bullets = pygame.sprite.Group(live)

    assert resolve_bullet_hits(enemies, bullets) == 0
    assert enemies.sprites() == [a, b, c]
    assert bullets.sprites() == [live]
