from __future__ import annotations
import random
import pytest

from jungle_gun.enemies import Enemy
from jungle_gun.simulation import Simulation
from jungle_gun import settings


@pytest.fixture
def sim() -> Simulation:
    return Simulation(960, rng=random.Random(1234))


@pytest.fixture
def quiet_sim(sim: Simulation) -> Simulation:
    """A simulation whose spawner won't fire during a test."""
    sim.spawner.countdown = 10**6
    return sim


def ground_enemy(x: float, speed: float = 1.2) -> Enemy:
    return Enemy((x, settings.GROUND_Y - settings.ENEMY_HEIGHT), speed)
