"""Tick scheduling: one simulation step per display refresh, or per virtual tick in tests."""

from __future__ import annotations

from typing import Callable

import pygame

from .config import FPS


class Ticker:
    """Calls ``callback`` once per step while started."""

    def __init__(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self.running = False
        self.ticks = 0

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def step(self) -> bool:
        """Run one tick if started. Returns True if a tick ran."""
        if not self.running:
            return False
        self.ticks += 1
        self._callback()
        return True

    def wait_frame(self) -> bool:
        """Step once; subclasses pace to the display first."""
        return self.step()


class VirtualTicker(Ticker):
    """Ticks only when told to, with no real-time pacing."""

    def advance(self, n: int) -> int:
        """Step up to ``n`` times, stopping early if the callback stops the ticker."""
        done = 0
        for _ in range(n):
            if not self.step():
                break
            done += 1
        return done


class DisplayTicker(Ticker):
    """Paces steps to the display frame rate with ``pygame.time.Clock``."""

    def __init__(self, callback: Callable[[], None], fps: int = FPS) -> None:
        super().__init__(callback)
        self.fps = fps
        self.clock = pygame.time.Clock()

    def wait_frame(self) -> bool:
        self.clock.tick(self.fps)
        return self.step()
