# utils.py
# Small helpers so core classes stay readable.

from __future__ import annotations
import os
from typing import Protocol


class Box(Protocol):
    x: float
    y: float
    w: float
    h: float


def project_path(*parts: str) -> str:
    """Build a path relative to the project root."""
    here = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(here, *parts)


def save_path(filename: str) -> str:
    return project_path("saves", filename)


def overlaps(a: Box, b: Box) -> bool:
    """
    Axis-aligned box intersection.

    Edges that only touch do not count.
    """
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
