import os
import random

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from dino_run.config import (
    CLOUD_INTERVAL,
    CLOUD_SPEED,
    DINO_X,
    GAME_SPEED_INCREMENT,
    GAME_SPEED_INITIAL,
)
from dino_run.entities import Cactus, Cloud
from dino_run.world import World


def test_reset_state() -> None:
    w = World(random.Random(1))
    for _ in range(20):
        w.tick()
    w.dino.jump()
    w.reset()
    assert w.score == 0
    assert w.ticks == 0
    assert w.speed == GAME_SPEED_INITIAL
    assert w.obstacles == []
    assert w.clouds == []
    assert not w.crashed
    assert not w.dino.airborne
    assert w.spawner.next_spawn_distance == 0


def test_first_tick_spawns_an_obstacle() -> None:
    w = World(random.Random(2))
    assert w.tick() is False
    assert len(w.obstacles) >= 1
    assert w.score == 1
    assert w.speed == pytest.approx(GAME_SPEED_INITIAL + GAME_SPEED_INCREMENT)


def test_score_and_speed_strictly_increase() -> None:
    w = World(random.Random(3))
    prev_score, prev_speed = w.score, w.speed
    for _ in range(100):
        assert w.tick() is False
        assert w.score > prev_score
        assert w.speed > prev_speed
        prev_score, prev_speed = w.score, w.speed


def test_obstacles_scroll_by_current_speed() -> None:
    w = World(random.Random(4))
    w.clouds.append(Cloud(500, 40, 80, 30))
    for _ in range(100):
        before = {id(o): o.x for o in w.obstacles}
        clouds_before = {id(c): c.x for c in w.clouds}
        w.tick()
        for o in w.obstacles:
            if id(o) in before:
                assert before[id(o)] - o.x == pytest.approx(w.speed)
        for c in w.clouds:
            if id(c) in clouds_before:
                assert clouds_before[id(c)] - c.x == pytest.approx(CLOUD_SPEED)


def test_offscreen_entities_are_pruned() -> None:
    w = World(random.Random(5))
    gone = Cactus(-30, 30, 50)
    # Trailing edge lands exactly on x = 0 after this tick
    edge = Cactus(0, w.speed + GAME_SPEED_INCREMENT, 50)
    cloud = Cloud(-79.5, 40, 80, 30)
    w.obstacles.extend([gone, edge])
    w.clouds.append(cloud)
    w.tick()
    assert gone not in w.obstacles
    assert edge not in w.obstacles
    assert cloud not in w.clouds


def test_clouds_spawn_on_interval() -> None:
    w = World(random.Random(6))
    for _ in range(CLOUD_INTERVAL - 1):
        # Keep the field clear so the run never ends early
        w.obstacles.clear()
        assert w.tick() is False
    assert w.clouds == []
    w.obstacles.clear()
    w.tick()
    assert w.ticks == CLOUD_INTERVAL
    assert len(w.clouds) == 1


def test_collision_ends_the_run() -> None:
    w = World(random.Random(7))
    w.obstacles.append(Cactus(DINO_X + 10, 30, 50))
    assert w.tick() is True
    assert w.crashed
    score = w.score
    # Frozen after the hit
    assert w.tick() is True
    assert w.score == score


def test_jump_clears_a_low_cactus() -> None:
    w = World(random.Random(8))
    w.dino.jump()
    for _ in range(10):
        w.tick()
    # Apex region is well above a 65 px cactus
    w.obstacles.append(Cactus(DINO_X, 30, 65))
    assert w.check_collisions() is False


def test_same_seed_same_run() -> None:
    a = World(random.Random(99))
    b = World(random.Random(99))
    for _ in range(100):
        a.tick()
        b.tick()
    assert [o.box for o in a.obstacles] == [o.box for o in b.obstacles]
    assert a.spawner.next_spawn_distance == b.spawner.next_spawn_distance
