import os
import random

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from dino_run.config import CACTUS_WIDTH, CLUSTER_GAP, GROUND_HEIGHT, WINDOW_WIDTH
from dino_run.entities import Bird, Cactus
from dino_run.spawner import SpawnManager


class FixedDraw(random.Random):
    """Random source whose ``random()`` always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def test_score_gate_overrides_high_draw() -> None:
    spawner = SpawnManager(FixedDraw(0.95))
    spawned = spawner.spawn_obstacles(250)
    assert len(spawned) == 1
    assert isinstance(spawned[0], Cactus)


def test_bird_once_score_allows_it() -> None:
    spawner = SpawnManager(FixedDraw(0.95))
    spawned = spawner.spawn_obstacles(600)
    assert len(spawned) == 1
    assert isinstance(spawned[0], Bird)
    assert spawned[0].x == WINDOW_WIDTH


def test_triple_cluster_spacing() -> None:
    spawner = SpawnManager(FixedDraw(0.85))
    spawned = spawner.spawn_obstacles(1500)
    assert len(spawned) == 3
    assert all(isinstance(o, Cactus) for o in spawned)
    pitch = CACTUS_WIDTH + CLUSTER_GAP
    assert [o.x for o in spawned] == [WINDOW_WIDTH, WINDOW_WIDTH + pitch, WINDOW_WIDTH + 2 * pitch]
    for o in spawned:
        assert o.width == pytest.approx(33.5)
        assert o.height == pytest.approx(62.75)
        assert o.y + o.height == pytest.approx(GROUND_HEIGHT)


def test_failed_gate_falls_through_to_next_rule() -> None:
    # 0.85 misses the triple gate at 600 but still qualifies for a pair
    assert len(SpawnManager(FixedDraw(0.85)).spawn_obstacles(600)) == 2
    # 0.95 misses the bird gate at 400 and the triple gate, lands on a pair
    assert len(SpawnManager(FixedDraw(0.95)).spawn_obstacles(400)) == 2
    assert len(SpawnManager(FixedDraw(0.5)).spawn_obstacles(5000)) == 1


def test_cluster_sizes_vary_per_instance() -> None:
    spawner = SpawnManager(random.Random(3))
    cluster = spawner.make_cluster(3)
    for o in cluster:
        assert 25 <= o.width < 35
        assert 50 <= o.height < 65
    assert len({o.height for o in cluster}) == 3


@pytest.mark.parametrize("speed", [6.0, 6.002, 7.3, 13.37])
def test_next_gap_scales_with_speed(speed: float) -> None:
    spawner = SpawnManager(random.Random(11))
    for _ in range(500):
        d = spawner.set_next_spawn_distance(speed)
        assert 50 * speed <= d <= 100 * speed


def test_spawns_when_field_is_empty() -> None:
    spawner = SpawnManager(random.Random(5))
    obstacles: list = []
    spawned = spawner.manage(obstacles, score=0, speed=6.0)
    assert spawned and obstacles == spawned
    assert 300 <= spawner.next_spawn_distance <= 600


def test_waits_for_gap_threshold() -> None:
    spawner = SpawnManager(random.Random(5))
    spawner.next_spawn_distance = 300
    last = Cactus(WINDOW_WIDTH - 299 - 30, 30, 50)
    obstacles = [last]
    assert spawner.gap(obstacles) == 299
    assert spawner.manage(obstacles, score=0, speed=6.0) == []
    assert obstacles == [last]

    last.x -= 1
    spawned = spawner.manage(obstacles, score=0, speed=6.0)
    assert len(spawned) == 1
    assert obstacles[-1] is spawned[-1]


def test_cloud_dimensions() -> None:
    spawner = SpawnManager(random.Random(9))
    for _ in range(100):
        cloud = spawner.make_cloud()
        assert cloud.x == WINDOW_WIDTH
        assert 30 <= cloud.y < 130
        assert 60 <= cloud.width < 100
        assert 20 <= cloud.height < 30
