# render.py
# Everything here only READS a Snapshot and draws it with plain pygame.draw
# calls (no image assets). Draw order: background (with the mega flash) ->
# bullets -> enemies -> player -> HUD.

from __future__ import annotations
import pygame
from .hud import banner, hud_lines
from .simulation import Snapshot
from . import settings

GROUND_Y = settings.GROUND_Y
STAR_COUNT = 90
TREE_COUNT = 36

# 16x24 pixel soldier, drawn at 2x. "." is transparent.
PLAYER_SPRITE = [
    "................",
    "....rrrrrr......",
    "...rrhhhhrr.....",
    "...rhhsshhrr....",
    "...rhhsshhhr....",
    "...rrhsshhrr....",
    "....rrrrrrrr....",
    "...ttttbbtt.....",
    "..ttttbbbbtt....",
    "..tttbbbbbbt....",
    "..tttbbbbbbt....",
    "..tttbbbbbbt....",
    "...ttbbbbtt.....",
    "...ttbbbbtt.....",
    "..ss.ttbb..ss...",
    "..ss..tt...ss...",
    "..pp..pp...pp...",
    ".ppp..pp..ppp...",
    ".pp....p..pp....",
    ".pp....p..pp....",
    "..k....k...k....",
    "..k....k...k....",
    "................",
    "................",
]

PLAYER_COLORS = {
    "r": (212, 59, 47),    # headband
    "h": (64, 37, 25),     # hair
    "s": (244, 207, 159),  # skin
    "t": (45, 95, 214),    # shirt
    "b": (34, 61, 142),    # shirt shade
    "p": (77, 73, 216),    # pants
    "k": (28, 28, 28),     # boots
}


def make_stars() -> list[tuple[float, float, int]]:
    """Fixed pseudo-random star field so the sky doesn't shimmer."""
    stars = []
    for i in range(STAR_COUNT):
        t = (i * 137.13) % 997
        stars.append(((t * 37) % settings.WORLD_WIDTH, 20 + ((t * 53) % 200), 1 + int((t * 7) % 2)))
    return stars


def build_sprite(rows: list[str], palette: dict[str, tuple[int, int, int]], scale: int) -> pygame.Surface:
    surf = pygame.Surface((len(rows[0]) * scale, len(rows) * scale), pygame.SRCALPHA)
    for row, line in enumerate(rows):
        for col, key in enumerate(line):
            if key == ".":
                continue
            surf.fill(palette[key], (col * scale, row * scale, scale, scale))
    return surf


def wrap(x: float, span: float, shift: float) -> float:
    """Wrap a parallax coordinate into [-shift, span - shift)."""
    return (x % span) - shift


class Renderer:
    def __init__(self, font: pygame.font.Font, big_font: pygame.font.Font, mega_enabled: bool = True):
        self.font = font
        self.big_font = big_font
        self.mega_enabled = mega_enabled
        self.stars = make_stars()

        sprite = build_sprite(PLAYER_SPRITE, PLAYER_COLORS, 2)
        self.player_right = sprite
        self.player_left = pygame.transform.flip(sprite, True, False)

    def draw(self, surface: pygame.Surface, snap: Snapshot) -> None:
        self.draw_background(surface, snap)
        self.draw_bullets(surface, snap)
        self.draw_enemies(surface, snap)
        self.draw_player(surface, snap)
        self.draw_hud(surface, snap)

    # ------------------ Background ------------------
    def draw_background(self, surface: pygame.Surface, snap: Snapshot) -> None:
        width, height = surface.get_size()
        cam = snap.camera_x
        surface.fill((2, 4, 12))

        # Stars (slowest layer)
        for sx, sy, r in self.stars:
            x = wrap(sx - cam * 0.2, width + 100, 50)
            surface.fill((216, 216, 216), (x, sy, r, r))

        # Moon-lit peak + far mountains (fixed)
        pygame.draw.polygon(surface, (230, 230, 230), [(60, 170), (130, 40), (210, 170)])
        pygame.draw.polygon(surface, (32, 51, 34), [
            (-40, GROUND_Y - 140), (80, GROUND_Y - 230), (190, GROUND_Y - 130),
            (330, GROUND_Y - 250), (480, GROUND_Y - 125), (620, GROUND_Y - 240),
            (780, GROUND_Y - 120), (width + 60, GROUND_Y - 120),
            (width + 60, GROUND_Y), (-40, GROUND_Y),
        ])

        # Jungle trees (middle layer)
        for i in range(TREE_COUNT):
            x = wrap(i * 180 - cam * 0.55, width + 220, 110)
            trunk_h = 110 + (i % 4) * 18
            surface.fill((47, 78, 33), (x + 20, GROUND_Y - trunk_h, 14, trunk_h))
            surface.fill((47, 78, 33), (x + 40, GROUND_Y - trunk_h + 12, 10, trunk_h - 12))
            surface.fill((95, 159, 53), (x - 8, GROUND_Y - trunk_h - 18, 70, 18))

        # Bushes + grass strip
        for x in range(-20, width + 40, 38):
            surface.fill((110, 169, 45), (x, GROUND_Y - 48, 34, 18))
            surface.fill((110, 169, 45), (x + 6, GROUND_Y - 60, 26, 12))
        surface.fill((143, 200, 47), (0, GROUND_Y - 16, width, 16))
        for x in range(0, width, 26):
            surface.fill((77, 138, 31), (x + (x // 13) % 3, GROUND_Y - 20, 10, 4))

        # Rocky ground
        for x in range(-40, width + 80, 56):
            surface.fill((143, 122, 42), (x, GROUND_Y, 56, height - GROUND_Y))
            surface.fill((211, 158, 35), (x + 5, GROUND_Y + 8, 18, 10))
            surface.fill((211, 158, 35), (x + 28, GROUND_Y + 20, 20, 8))
            surface.fill((211, 158, 35), (x + 12, GROUND_Y + 36, 30, 9))
            surface.fill((77, 63, 19), (x + 1, GROUND_Y + 2, 6, 4))
            surface.fill((77, 63, 19), (x + 26, GROUND_Y + 14, 5, 4))

        # Mega blast flash tints the scenery only; entities draw on top.
        if snap.mega_flash > 0:
            overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
            overlay.fill((255, 255, 220, 90))
            surface.blit(overlay, (0, 0))

    # ------------------ Entities ------------------
    def draw_bullets(self, surface: pygame.Surface, snap: Snapshot) -> None:
        for b in snap.bullets:
            surface.fill((255, 211, 77), (b.x - snap.camera_x, b.y, b.w, b.h))

    def draw_enemies(self, surface: pygame.Surface, snap: Snapshot) -> None:
        for e in snap.enemies:
            sx = e.x - snap.camera_x
            surface.fill((207, 58, 45), (sx + 8, e.y + 18, 16, 16))     # body
            surface.fill((58, 143, 51), (sx + 8, e.y + 34, 8, 14))      # legs
            surface.fill((58, 143, 51), (sx + 16, e.y + 34, 8, 14))
            surface.fill((240, 207, 157), (sx + 10, e.y + 8, 12, 10))   # head
            surface.fill((30, 30, 30), (sx + 5, e.y + 23, 8, 3))        # arms
            surface.fill((30, 30, 30), (sx + 22, e.y + 23, 8, 3))

    def draw_player(self, surface: pygame.Surface, snap: Snapshot) -> None:
        p = snap.player
        if p is None:
            return
        px = p.x - snap.camera_x
        py = p.y + 6
        surface.blit(self.player_right if p.facing > 0 else self.player_left, (px, py))

        # Rifle
        gun_x = px + 24 if p.facing > 0 else px - 8
        surface.fill((18, 18, 18), (gun_x, py + 20, 14, 4))
        surface.fill((18, 18, 18), (gun_x + (12 if p.facing > 0 else -2), py + 19, 4, 2))
        surface.fill((138, 138, 138), (gun_x + 4, py + 21, 4, 2))

    # ------------------ HUD ------------------
    def draw_hud(self, surface: pygame.Surface, snap: Snapshot) -> None:
        y = 12
        for line in hud_lines(snap, self.mega_enabled):
            txt = self.font.render(line, True, (240, 240, 240))
            surface.blit(txt, (16, y))
            y += txt.get_height() + 2

        message = banner(snap)
        if message:
            surf = self.big_font.render(message, True, (250, 230, 140))
            rect = surf.get_rect(center=(surface.get_width() // 2, 120))
            surface.blit(surf, rect)
