# hud.py
# Text for the heads-up display. Kept free of pygame so it is easy to test.

from __future__ import annotations
import math
from typing import TYPE_CHECKING
from . import settings

if TYPE_CHECKING:
    from .simulation import Snapshot

RESPAWN_TEXT = "Respawning..."


def mega_status(cooldown: int) -> str:
    if cooldown <= 0:
        return "Ready"
    return f"{math.ceil(cooldown / settings.FPS)}s"


def run_status(paused: bool) -> str:
    return "Paused" if paused else "Running"


def hud_lines(snap: Snapshot, mega_enabled: bool = True) -> list[str]:
    lines = [
        f"Player: {snap.player_name}",
        f"Score: {snap.score}",
        f"High score: {snap.high_score}",
        f"Deaths: {snap.deaths}",
    ]
    if mega_enabled:
        lines.append(f"Mega: {mega_status(snap.mega_cooldown)}")
    lines.append(run_status(snap.paused))
    return lines


def banner(snap: Snapshot) -> str | None:
    """Big centered message, if any."""
    if snap.player is None:
        return RESPAWN_TEXT
    if snap.paused:
        return "PAUSED"
    return None
