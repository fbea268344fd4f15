# game.py
# The Game class owns the window, the main loop and the key bindings.
# States: PLAYING <-> NAME_ENTRY (the simulation keeps running in both).
#
# One Simulation.step() per rendered frame. The clock caps the frame rate at
# settings.FPS; real elapsed time is ignored on purpose, because every
# physics constant is tuned per frame.

from __future__ import annotations
import argparse
import logging
import random
import pygame

from . import settings
from .render import Renderer
from .simulation import Simulation
from .storage import Storage
from .utils import save_path

logger = logging.getLogger(__name__)

KEY_ACTIONS = {
    pygame.K_a: "left",
    pygame.K_LEFT: "left",
    pygame.K_d: "right",
    pygame.K_RIGHT: "right",
    pygame.K_w: "jump",
    pygame.K_UP: "jump",
    pygame.K_SPACE: "jump",
    pygame.K_j: "shoot",
    pygame.K_k: "mega",
    pygame.K_p: "pause",
    pygame.K_r: "restart",
}


class Game:
    def __init__(
        self,
        width: int = settings.WINDOW_WIDTH,
        *,
        mega_enabled: bool = True,
        seed: int | None = None,
        save_file: str | None = None,
    ):
        pygame.init()

        self.window = pygame.display.set_mode((width, settings.WINDOW_HEIGHT))
        pygame.display.set_caption("Jungle Gun")
        # SDL starts with text input on; only name entry wants TEXTINPUT events.
        pygame.key.stop_text_input()

        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("consolas", 20)
        self.big_font = pygame.font.SysFont("consolas", 32, bold=True)

        self.storage = Storage(save_file or save_path(settings.SAVE_FILE))
        self.sim = Simulation(
            width,
            mega_enabled=mega_enabled,
            rng=random.Random(seed),
            storage=self.storage,
        )
        self.renderer = Renderer(self.font, self.big_font, mega_enabled=mega_enabled)

        self.state = "PLAYING"  # PLAYING, NAME_ENTRY
        self.name_buffer = ""
        self.running = True

    # ------------------ Main loop ------------------
    def run(self) -> None:
        logger.info("Starting Jungle Gun as %s", self.sim.player_name)
        while self.running:
            self.clock.tick(settings.FPS)

            self.handle_events()
            self.sim.step()
            self.draw()

        pygame.quit()

    # ------------------ Events ------------------
    def handle_events(self) -> None:
        opened_entry = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif self.state == "NAME_ENTRY":
                # the "n" that opened the prompt may still be queued as text
                if opened_entry and event.type == pygame.TEXTINPUT:
                    continue
                self.handle_name_entry(event)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_n:
                    self.begin_name_entry()
                    opened_entry = True
                elif event.key in KEY_ACTIONS:
                    self.sim.handle_action(KEY_ACTIONS[event.key], True)

            elif event.type == pygame.KEYUP and event.key in KEY_ACTIONS:
                self.sim.handle_action(KEY_ACTIONS[event.key], False)

    def begin_name_entry(self) -> None:
        self.state = "NAME_ENTRY"
        self.name_buffer = self.sim.player_name
        # Keys released while typing never reach the simulation.
        self.sim.handle_action("left", False)
        self.sim.handle_action("right", False)
        pygame.key.start_text_input()

    def end_name_entry(self, save: bool) -> None:
        if save:
            name = self.sim.set_player_name(self.name_buffer)
            logger.info("Player name set to %s", name)
        self.state = "PLAYING"
        pygame.key.stop_text_input()

    def handle_name_entry(self, event: pygame.event.Event) -> None:
        if event.type == pygame.TEXTINPUT:
            if len(self.name_buffer) < settings.MAX_PLAYER_NAME:
                self.name_buffer += event.text
        elif event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.end_name_entry(save=True)
            elif event.key == pygame.K_ESCAPE:
                self.end_name_entry(save=False)
            elif event.key == pygame.K_BACKSPACE:
                self.name_buffer = self.name_buffer[:-1]

    # ------------------ Draw ------------------
    def draw(self) -> None:
        self.renderer.draw(self.window, self.sim.snapshot())

        if self.state == "NAME_ENTRY":
            self.draw_overlay()
            self.draw_center_text("Enter your name", y=200, big=True)
            self.draw_center_text(self.name_buffer + "_", y=260)
            self.draw_center_text("ENTER to save, ESC to cancel", y=310)
        else:
            self.draw_center_text(
                "A/D move  W jump  J shoot  K mega  P pause  R restart  N name",
                y=settings.WINDOW_HEIGHT - 20,
            )

        pygame.display.flip()

    # ------------------ UI helpers ------------------
    def draw_center_text(self, text: str, y: int, big: bool = False) -> None:
        f = self.big_font if big else self.font
        surf = f.render(text, True, (240, 240, 240))
        rect = surf.get_rect(center=(self.window.get_width() // 2, y))
        self.window.blit(surf, rect)

    def draw_overlay(self) -> None:
        overlay = pygame.Surface(self.window.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        self.window.blit(overlay, (0, 0))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Side-scrolling run and gun.")
    parser.add_argument("--width", type=int, default=settings.WINDOW_WIDTH, help="window / view width in pixels")
    parser.add_argument("--no-mega", action="store_true", help="play without the mega blast")
    parser.add_argument("--seed", type=int, default=None, help="seed for enemy spawns")
    parser.add_argument("--save-file", default=None, help="where to keep the player name and high score")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = Game(args.width, mega_enabled=not args.no_mega, seed=args.seed, save_file=args.save_file)
    game.run()
