"""Game driver: session lifecycle, the tick/render loop and the window."""

from __future__ import annotations

import logging
import random
import sys
from typing import Callable

import pygame

from .config import LOG_LEVEL, WINDOW_HEIGHT, WINDOW_WIDTH
from .controls import Controls
from .render import Renderer
from .scores import ScoreKeeper, display_points
from .ticker import DisplayTicker, Ticker
from .world import GameState, World

logger = logging.getLogger(__name__)


class Game:
    """Top-level controller: owns the world, the ticker and the collaborators.

    Idle -> Running on ``start()``, Running -> Over on a collision and
    Over -> Running on ``restart()``. While running, every frame is one tick
    followed by one render.
    """

    def __init__(
        self,
        ticker_cls: Callable[[Callable[[], None]], Ticker] = DisplayTicker,
        scores: ScoreKeeper | None = None,
        rng: random.Random | None = None,
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.DOUBLEBUF)
        pygame.display.set_caption("Dino Run")
        self.world = World(rng)
        self.scores = scores if scores is not None else ScoreKeeper()
        self.ticker = ticker_cls(self.step)
        self.renderer = Renderer(self.screen)
        self.controls = Controls(self)
        self.state = GameState.IDLE
        self.game_over_listeners: list[Callable[[int], None]] = []

    def start(self) -> None:
        if self.state is GameState.RUNNING:
            return
        self.world.reset()
        self.scores.track(0)
        self.state = GameState.RUNNING
        self.ticker.start()
        logger.info("Session started (best %d)", display_points(self.scores.best_score()))

    def restart(self) -> None:
        if self.state is not GameState.OVER:
            return
        self.start()

    def jump(self) -> None:
        if self.state is GameState.RUNNING:
            self.world.dino.jump()

    def duck(self, pressed: bool) -> None:
        if self.state is GameState.RUNNING:
            self.world.dino.duck(pressed)

    def step(self) -> None:
        """One simulation tick."""
        crashed = self.world.tick()
        self.scores.track(self.world.score)
        if crashed:
            self.trigger_game_over()

    def trigger_game_over(self) -> None:
        if self.state is not GameState.RUNNING:
            return
        self.state = GameState.OVER
        self.ticker.stop()
        self.scores.record_score(self.world.score)
        final = display_points(self.world.score)
        logger.info("Game over: score %d, best %d", final, display_points(self.scores.best_score()))
        for listener in self.game_over_listeners:
            listener(final)

    def draw(self) -> None:
        self.renderer.draw(self.world, self.state, self.scores)
        pygame.display.flip()

    def run(self) -> None:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    if self.state is GameState.RUNNING:
                        self.scores.record_score(self.world.score)
                    pygame.quit()
                    sys.exit(0)
                self.controls.handle(event)

            # Idle and game-over frames still wait on the clock but do not tick
            self.ticker.wait_frame()
            self.draw()


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main() -> None:
    setup_logging()
    Game().run()
