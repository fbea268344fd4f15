# camera.py
# Horizontal scrolling only. The camera snaps to its target every frame
# (no lerp) and keeps the player a bit left of center to show what's ahead.

from __future__ import annotations
from .utils import clamp
from . import settings


class Camera:
    def __init__(self, view_width: float):
        if view_width <= 0 or view_width > settings.WORLD_WIDTH:
            raise ValueError(
                f"View width must be in (0, {settings.WORLD_WIDTH}], got {view_width}"
            )
        self.view_width = view_width
        self.x = 0.0

    @property
    def max_x(self) -> float:
        return settings.WORLD_WIDTH - self.view_width

    def reset(self) -> None:
        self.x = 0.0

    def follow(self, player) -> None:
        target_x = player.x - self.view_width * settings.CAMERA_LEAD
        self.x = clamp(target_x, 0, self.max_x)

    def to_screen(self, world_x: float) -> float:
        return world_x - self.x
