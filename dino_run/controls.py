"""Maps keyboard, mouse and touch events onto game commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pygame

from .config import DUCK_BUTTON, START_BUTTON, WINDOW_HEIGHT, WINDOW_WIDTH
from .world import GameState

if TYPE_CHECKING:
    from .game import Game

logger = logging.getLogger(__name__)

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)
START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)


class Controls:
    """Turns raw input events into ``jump()``, ``duck(pressed)``, ``start()`` and ``restart()``.

    ``handle`` returns True when the event was mapped and consumed.
    """

    def __init__(self, game: Game) -> None:
        self.game = game
        self.start_rect = pygame.Rect(START_BUTTON)
        self.duck_rect = pygame.Rect(DUCK_BUTTON)
        # Pointer ids currently holding the duck button
        self._duck_holds: set[int] = set()

    @property
    def running(self) -> bool:
        return self.game.state is GameState.RUNNING

    def handle(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.KEYDOWN:
            return self._key_down(event.key)
        if event.type == pygame.KEYUP:
            return self._key_up(event.key)
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP) and getattr(event, "touch", False):
            # SDL mirrors touches as mouse events; the FINGER events already handled them
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self._press(event.pos, pointer=-1)
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            return self._release(pointer=-1)
        if event.type == pygame.FINGERDOWN:
            pos = (int(event.x * WINDOW_WIDTH), int(event.y * WINDOW_HEIGHT))
            return self._press(pos, pointer=event.finger_id)
        if event.type == pygame.FINGERUP:
            return self._release(pointer=event.finger_id)
        return False

    def _key_down(self, key: int) -> bool:
        if key == pygame.K_ESCAPE:
            pygame.event.post(pygame.event.Event(pygame.QUIT))
            return True
        if not self.running:
            if key in START_KEYS:
                self._start_or_restart()
                return True
            return False
        if key in JUMP_KEYS:
            self.game.jump()
            return True
        if key == pygame.K_DOWN:
            self.game.duck(True)
            return True
        return False

    def _key_up(self, key: int) -> bool:
        if self.running and key == pygame.K_DOWN:
            self.game.duck(False)
            return True
        return False

    def _press(self, pos: tuple[int, int], pointer: int) -> bool:
        if not self.running:
            if self.start_rect.collidepoint(pos):
                self._start_or_restart()
                return True
            return False
        if self.duck_rect.collidepoint(pos):
            self._duck_holds.add(pointer)
            self.game.duck(True)
        else:
            # Jump button and the open play field both jump
            self.game.jump()
        return True

    def _release(self, pointer: int) -> bool:
        if pointer not in self._duck_holds:
            return False
        self._duck_holds.discard(pointer)
        if not self._duck_holds:
            self.game.duck(False)
        return True

    def _start_or_restart(self) -> None:
        self._duck_holds.clear()
        logger.debug("Start requested while %s", self.game.state.value)
        if self.game.state is GameState.OVER:
            self.game.restart()
        else:
            self.game.start()
