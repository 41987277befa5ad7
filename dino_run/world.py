"""Session state and the per-tick simulation step."""

from __future__ import annotations

import logging
import random
from enum import Enum

from .config import CLOUD_INTERVAL, GAME_SPEED_INCREMENT, GAME_SPEED_INITIAL, WINDOW_WIDTH
from .entities import Cloud, Dino, Obstacle
from .spawner import SpawnManager
from .utils import boxes_collide

logger = logging.getLogger(__name__)


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


class World:
    """Everything one play session owns: the dino, obstacles, clouds, score and speed."""

    def __init__(self, rng: random.Random | None = None, field_width: int = WINDOW_WIDTH) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.dino = Dino()
        self.spawner = SpawnManager(self.rng, field_width)
        self.reset()

    def reset(self) -> None:
        self.score = 0
        self.speed = GAME_SPEED_INITIAL
        self.ticks = 0
        self.obstacles: list[Obstacle] = []
        self.clouds: list[Cloud] = []
        self.crashed = False
        self.spawner.reset()
        self.dino.reset()

    def tick(self) -> bool:
        """Advance one tick. Returns True if the dino hit an obstacle."""
        if self.crashed:
            return True
        self.ticks += 1
        self.score += 1
        self.speed += GAME_SPEED_INCREMENT

        self.dino.update()

        for obs in self.obstacles:
            obs.update(self.speed)
        self.obstacles = [o for o in self.obstacles if not o.offscreen()]

        for cloud in self.clouds:
            cloud.update()
        self.clouds = [c for c in self.clouds if not c.offscreen()]

        self.spawner.manage(self.obstacles, self.score, self.speed)
        if self.ticks % CLOUD_INTERVAL == 0:
            self.clouds.append(self.spawner.make_cloud())

        self.crashed = self.check_collisions()
        return self.crashed

    def check_collisions(self) -> bool:
        box = self.dino.box
        for obs in self.obstacles:
            if boxes_collide(box, obs.box):
                logger.info("Hit %s at x=%.1f, score %d", obs.kind, obs.x, self.score)
                return True
        return False
