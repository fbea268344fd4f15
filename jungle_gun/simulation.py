# simulation.py
# The Simulation owns every piece of mutable game state and advances it one
# fixed frame per step(). No pygame display is needed here, so it runs
# headless in tests.
#
# Player lifecycle: ALIVE -> (enemy contact) -> ABSENT -> (respawn timer) -> ALIVE
# Lives are unlimited; deaths are only counted.

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
import pygame
from .camera import Camera
from .collisions import find_player_hit, resolve_bullet_hits
from .enemies import Enemy, EnemySpawner
from .player import Player
from .storage import Storage
from .utils import clamp
from .weapon import Bullet, MegaBlast
from . import settings

logger = logging.getLogger(__name__)

HELD_ACTIONS = ("left", "right")
QUEUED_ACTIONS = ("jump", "shoot", "mega")
ACTIONS = HELD_ACTIONS + QUEUED_ACTIONS + ("pause", "restart")


@dataclass(frozen=True)
class Snapshot:
    """What the renderer and HUD get to see each frame."""
    camera_x: float
    view_width: float
    player: Player | None
    bullets: tuple[Bullet, ...]
    enemies: tuple[Enemy, ...]
    paused: bool
    mega_flash: int
    mega_cooldown: int
    score: int
    high_score: int
    deaths: int
    player_name: str


class Simulation:
    def __init__(
        self,
        view_width: float = settings.WINDOW_WIDTH,
        *,
        mega_enabled: bool = True,
        rng: random.Random | None = None,
        storage: Storage | None = None,
    ):
        self.view_width = view_width
        self.camera = Camera(view_width)
        self.mega_enabled = mega_enabled
        self.storage = storage if storage is not None else Storage()

        self.player_name = self.storage.load_player_name()
        self.high_score = self.storage.load_high_score()

        # Input
        self.keys = {"left": False, "right": False}
        self.pending: set[str] = set()

        # World content
        self.player: Player | None = None
        self.bullets = pygame.sprite.Group()
        self.enemies = pygame.sprite.Group()
        self.spawner = EnemySpawner(rng)
        self.mega = MegaBlast()

        self.score = 0
        self.deaths = 0
        self.respawn_timer = 0
        self.paused = False

        self.restart()

    @property
    def camera_x(self) -> float:
        return self.camera.x

    def restart(self) -> None:
        self.score = 0
        self.deaths = 0
        self.camera.reset()
        self.bullets.empty()
        self.enemies.empty()
        self.spawner.reset()
        self.respawn_timer = 0
        self.mega.reset()
        self.paused = False
        self.pending.clear()
        self.player = Player()
        logger.info("Game restarted (high score %d)", self.high_score)

    # ------------------ Input ------------------
    def handle_action(self, action: str, pressed: bool) -> None:
        """
        left/right follow the held state. The rest only react to presses:
        jump/shoot/mega wait for the next step, pause/restart apply now.
        """
        if action not in ACTIONS:
            raise ValueError(f"Unknown action {action!r}; expected one of {', '.join(ACTIONS)}")

        if action in HELD_ACTIONS:
            self.keys[action] = pressed
            return

        if not pressed:
            return

        if action == "pause":
            self.toggle_pause()
        elif action == "restart":
            self.restart()
        else:
            self.pending.add(action)

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def set_player_name(self, name: str) -> str:
        self.player_name = self.storage.save_player_name(name)
        return self.player_name

    # ------------------ Actions ------------------
    def jump(self) -> bool:
        if self.player is None:
            return False
        return self.player.jump()

    def shoot(self) -> Bullet | None:
        if self.player is None:
            return None
        return self.player.try_shoot(self.bullets)

    def mega_blast(self) -> int | None:
        if not self.mega_enabled:
            return None
        killed = self.mega.fire(self.enemies, self.camera.x, self.view_width)
        if killed:
            self.score += killed * settings.KILL_SCORE
            logger.debug("Mega blast cleared %d enemies", killed)
        return killed

    def _consume_pending(self) -> None:
        pending, self.pending = self.pending, set()
        if "jump" in pending:
            self.jump()
        if "shoot" in pending:
            self.shoot()
        if "mega" in pending:
            self.mega_blast()

    # ------------------ Lifecycle ------------------
    def kill_player(self) -> None:
        self.player = None
        self.respawn_timer = settings.RESPAWN_FRAMES
        self.deaths += 1
        logger.info("Player down (deaths: %d)", self.deaths)

    def respawn_player(self) -> None:
        x = max(settings.RESPAWN_MIN_X, self.camera.x + settings.RESPAWN_CAMERA_OFFSET)
        x = clamp(x, 0, settings.WORLD_WIDTH - settings.PLAYER_WIDTH)
        self.player = Player(x)
        logger.info("Player respawned at x=%.1f", x)

    def save_high_score_if_needed(self) -> None:
        if self.score > self.high_score:
            self.high_score = self.score
            self.storage.save_high_score(self.high_score)

    # ------------------ Update ------------------
    def step(self) -> None:
        if self.paused:
            # Presses made while frozen don't fire later on resume.
            self.pending.clear()
            return

        self._consume_pending()
        self.mega.update()

        if self.player is None:
            self.respawn_timer -= 1
            if self.respawn_timer <= 0:
                self.respawn_player()
        else:
            self.player.update(self.keys["left"], self.keys["right"])
            self.camera.follow(self.player)
            self.update_bullets()
            self.update_enemies()
            self.handle_collisions()

        self.spawner.update(self.camera.x, self.view_width, self.enemies)
        self.save_high_score_if_needed()

    def update_bullets(self) -> None:
        self.bullets.update(self.camera.x, self.view_width)

    def update_enemies(self) -> None:
        self.enemies.update(self.camera.x)

    def handle_collisions(self) -> None:
        if self.player is None:
            return

        if find_player_hit(self.player, self.enemies) is not None:
            self.kill_player()
            return

        kills = resolve_bullet_hits(self.enemies, self.bullets)
        if kills:
            self.score += kills * settings.KILL_SCORE
            logger.debug("Shot %d enemies (score %d)", kills, self.score)

    # ------------------ Read access ------------------
    def snapshot(self) -> Snapshot:
        return Snapshot(
            camera_x=self.camera.x,
            view_width=self.view_width,
            player=self.player,
            bullets=tuple(self.bullets),
            enemies=tuple(self.enemies),
            paused=self.paused,
            mega_flash=self.mega.flash,
            mega_cooldown=self.mega.cooldown,
            score=self.score,
            high_score=self.high_score,
            deaths=self.deaths,
            player_name=self.player_name,
        )
