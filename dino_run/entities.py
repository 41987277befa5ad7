"""Game entities and their renderer-facing geometry.

Contains the player-controlled dino, the two obstacle variants and decorative
clouds. Entities own their state transitions; drawing code only reads the
shape parameters exposed here.
"""

from __future__ import annotations

import logging
import math
from enum import Enum

from .config import (
    BIRD_HEIGHT,
    BIRD_WIDTH,
    CLOUD_SPEED,
    DINO_DUCK_HEIGHT,
    DINO_HEIGHT,
    DINO_WIDTH,
    DINO_X,
    GRAVITY,
    GROUND_HEIGHT,
    JUMP_STRENGTH,
)
from .utils import Box

logger = logging.getLogger(__name__)

Point = tuple[float, float]


class Dino:
    """The runner: fixed x, vertical Euler physics, jump and duck states."""

    def __init__(self, x: float = DINO_X) -> None:
        self.x = float(x)
        self.width = DINO_WIDTH
        self.reset()

    def reset(self) -> None:
        self.height = DINO_HEIGHT
        self.y = float(GROUND_HEIGHT - DINO_HEIGHT)
        self.vy = 0.0
        self.airborne = False
        self.ducking = False

    @property
    def ground_y(self) -> float:
        """Resting y for the current pose, feet on the ground line."""
        return float(GROUND_HEIGHT - self.height)

    @property
    def box(self) -> Box:
        return (self.x, self.y, self.width, self.height)

    def jump(self) -> bool:
        """Launch if standing on the ground. Returns True if the jump happened."""
        if self.airborne or self.ducking:
            return False
        self.airborne = True
        self.vy = JUMP_STRENGTH
        logger.debug("Jump from y=%.1f", self.y)
        return True

    def duck(self, pressed: bool) -> None:
        if self.airborne:
            return
        self.ducking = pressed
        self.height = DINO_DUCK_HEIGHT if pressed else DINO_HEIGHT
        self.y = self.ground_y

    def update(self) -> None:
        if not self.airborne:
            return
        self.vy += GRAVITY
        self.y += self.vy
        if self.y >= self.ground_y:
            self.y = self.ground_y
            self.vy = 0.0
            self.airborne = False

    def shape_rects(self, ticks: int) -> list[Box]:
        """Rectangles making up the pixel-style dino for the given tick."""
        x, y = self.x, self.y
        step = (ticks // 5) % 2
        if self.ducking:
            # Long low body, head pushed forward, legs flush with the ground
            leg_shift = 2 * step
            return [
                (x, y + 11, 40, 15),
                (x - 5, y + 6, 10, 5),
                (x + 40, y + 6, 14, 10),
                (x + 10 + leg_shift, y + 26, 6, 4),
                (x + 25 + leg_shift, y + 26, 6, 4),
            ]

        rects = [
            (x + 20, y, 20, 15),  # head
            (x + 40, y + 5, 8, 8),  # snout
            (x + 15, y + 15, 15, 20),  # neck/body
            (x + 5, y + 20, 10, 15),  # back
            (x - 5, y + 25, 10, 5),  # tail
            (x + 30, y + 22, 5, 3),  # arm
            (x + 10, y + 35, 5, 12),  # back leg
        ]
        if self.airborne:
            rects.append((x + 20, y + 33, 5, 8))
        else:
            rects.append((x + 20, y + 35, 5, 12 - 4 * step))
        return rects


class Obstacle:
    """Shared state of everything the dino can run into."""

    kind = "obstacle"

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height

    @property
    def box(self) -> Box:
        return (self.x, self.y, self.width, self.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    def update(self, speed: float) -> None:
        self.x -= speed

    def offscreen(self) -> bool:
        return self.x + self.width <= 0


class Cactus(Obstacle):
    """Ground obstacle resting on the ground line."""

    kind = "cactus"

    def __init__(self, x: float, width: float, height: float) -> None:
        super().__init__(x, GROUND_HEIGHT - height, width, height)

    def outline(self) -> list[Point]:
        """Angular two-armed cactus silhouette, trunk centered."""
        x, y, w, h = self.box
        cw = w * 0.35  # column width
        left = x + (w - cw) / 2
        right = x + (w + cw) / 2
        return [
            (left, y + h),
            (left, y + h * 0.5),
            (x, y + h * 0.5),
            (x, y + h * 0.25),
            (x + cw, y + h * 0.25),
            (x + cw, y + h * 0.4),
            (left, y + h * 0.4),
            (left, y),
            (right, y),
            (right, y + h * 0.3),
            (x + w - cw, y + h * 0.3),
            (x + w - cw, y + h * 0.15),
            (x + w, y + h * 0.15),
            (x + w, y + h * 0.45),
            (right, y + h * 0.45),
            (right, y + h),
        ]

    def spine(self) -> tuple[Point, Point]:
        cx = self.x + self.width / 2
        return (cx, self.y + 5), (cx, self.y + self.height)


class AltitudeBand(Enum):
    """Bird flight heights, as the distance from the ground line to the bird's top."""

    HIGH = 100  # clears a grounded dino, hits one that jumps into it
    MID = 70  # clears a ducking dino, jump or duck
    LOW = 35  # hits a ducking dino, jump


class Bird(Obstacle):
    """Aerial obstacle flying at one of the altitude bands."""

    kind = "bird"

    def __init__(self, x: float, band: AltitudeBand) -> None:
        super().__init__(x, GROUND_HEIGHT - band.value, BIRD_WIDTH, BIRD_HEIGHT)
        self.band = band

    def body_rects(self) -> list[Box]:
        x, y = self.x, self.y
        return [
            (x + 10, y + 10, 20, 8),  # body
            (x + 28, y + 6, 8, 8),  # head
            (x + 36, y + 8, 4, 2),  # beak
        ]

    def wing(self, ticks: int) -> list[Point]:
        """Wing triangle, alternating up and down every 10 ticks."""
        x, y = self.x, self.y
        tip_y = y - 5 if (ticks // 10) % 2 == 0 else y + 20
        return [(x + 15, y + 10), (x + 20, tip_y), (x + 25, y + 10)]


class Cloud:
    """Decorative background cloud drifting at a constant speed."""

    # (center, half width, peak height above the base) as fractions of the cloud
    BUMPS = ((0.22, 0.22, 0.6), (0.5, 0.3, 1.0), (0.78, 0.22, 0.7))

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height

    def update(self) -> None:
        self.x -= CLOUD_SPEED

    def offscreen(self) -> bool:
        return self.x + self.width <= 0

    def outline(self, samples: int = 16) -> list[Point]:
        """Flat-bottomed silhouette with three rounded bumps, the middle one tallest."""
        x, y, w, h = self.x, self.y, self.width, self.height
        base = y + h
        # Center bump rises 10 px above the nominal top
        peak = h + 10
        points: list[Point] = [(x + w, base)]
        for i in range(samples, -1, -1):
            u = i / samples
            lift = 0.0
            for c, r, frac in self.BUMPS:
                d = (u - c) / r
                if abs(d) < 1.0:
                    lift = max(lift, frac * peak * math.sqrt(1.0 - d * d))
            points.append((x + u * w, base - lift))
        points.append((x, base))
        return points

    def data_line(self) -> tuple[Point, Point]:
        base = self.y + self.height - 5
        return (self.x + 10, base), (self.x + self.width - 10, base)
