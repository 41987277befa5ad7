"""Obstacle and cloud spawning: speed-fair gaps and a score-gated type mix."""

from __future__ import annotations

import logging
import math
import random

from .config import (
    BIRD_SCORE,
    CACTUS_HEIGHT,
    CACTUS_HEIGHT_VARIANCE,
    CACTUS_WIDTH,
    CACTUS_WIDTH_VARIANCE,
    CLUSTER_GAP,
    DOUBLE_CACTUS_SCORE,
    MAX_GAP_MULTIPLIER,
    MIN_GAP_MULTIPLIER,
    TRIPLE_CACTUS_SCORE,
    WINDOW_WIDTH,
)
from .entities import AltitudeBand, Bird, Cactus, Cloud, Obstacle

logger = logging.getLogger(__name__)


class SpawnManager:
    """Decides when and what to spawn at the field's right edge.

    All randomness comes from ``rng`` so a seeded or scripted generator makes
    spawning reproducible.
    """

    def __init__(self, rng: random.Random | None = None, field_width: int = WINDOW_WIDTH) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.field_width = field_width
        self.next_spawn_distance = 0

    def reset(self) -> None:
        self.next_spawn_distance = 0

    def gap_range(self, speed: float) -> tuple[int, int]:
        """Inclusive integer bounds of the next gap, both inside [50 * speed, 100 * speed]."""
        return math.ceil(speed * MIN_GAP_MULTIPLIER), math.floor(speed * MAX_GAP_MULTIPLIER)

    def set_next_spawn_distance(self, speed: float) -> int:
        lo, hi = self.gap_range(speed)
        self.next_spawn_distance = self.rng.randint(lo, hi)
        return self.next_spawn_distance

    def gap(self, obstacles: list[Obstacle]) -> float | None:
        """Distance from the trailing edge of the newest obstacle to the field edge."""
        if not obstacles:
            return None
        return self.field_width - obstacles[-1].right

    def should_spawn(self, obstacles: list[Obstacle]) -> bool:
        gap = self.gap(obstacles)
        return gap is None or gap >= self.next_spawn_distance

    def manage(self, obstacles: list[Obstacle], score: int, speed: float) -> list[Obstacle]:
        """Spawn into ``obstacles`` when the gap allows it and return what was added."""
        if not self.should_spawn(obstacles):
            return []
        spawned = self.spawn_obstacles(score)
        obstacles.extend(spawned)
        self.set_next_spawn_distance(speed)
        logger.debug(
            "Spawned %s at score %d, next gap %d",
            "+".join(o.kind for o in spawned),
            score,
            self.next_spawn_distance,
        )
        return spawned

    def spawn_obstacles(self, score: int) -> list[Obstacle]:
        # Rules are checked in order with one draw; a failed score gate falls through
        r = self.rng.random()
        if r > 0.9 and score > BIRD_SCORE:
            return [self.make_bird()]
        if r > 0.8 and score > TRIPLE_CACTUS_SCORE:
            return self.make_cluster(3)
        if r > 0.6 and score > DOUBLE_CACTUS_SCORE:
            return self.make_cluster(2)
        return self.make_cluster(1)

    def make_bird(self) -> Bird:
        band = self.rng.choice(list(AltitudeBand))
        return Bird(self.field_width, band)

    def make_cluster(self, count: int) -> list[Cactus]:
        """Tight row of cacti at a fixed pitch, each sized independently."""
        pitch = CACTUS_WIDTH + CLUSTER_GAP
        cluster = []
        for i in range(count):
            width = CACTUS_WIDTH + self.rng.random() * CACTUS_WIDTH_VARIANCE
            height = CACTUS_HEIGHT + self.rng.random() * CACTUS_HEIGHT_VARIANCE
            cluster.append(Cactus(self.field_width + i * pitch, width, height))
        return cluster

    def make_cloud(self) -> Cloud:
        return Cloud(
            self.field_width,
            self.rng.random() * 100 + 30,
            60 + self.rng.random() * 40,
            20 + self.rng.random() * 10,
        )
