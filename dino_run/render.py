"""Drawing of the world, HUD and panels. Reads state, never changes it."""

from __future__ import annotations

import pygame

from .config import (
    COL_BG_BOTTOM,
    COL_BG_TOP,
    COL_BIRD,
    COL_BUTTON,
    COL_CACTUS_EDGE,
    COL_CACTUS_FILL,
    COL_CLOUD_EDGE,
    COL_CLOUD_FILL,
    COL_CLOUD_LINE,
    COL_DINO,
    COL_GROUND,
    COL_PANEL,
    COL_TEXT,
    COL_TEXT_DIM,
    DUCK_BUTTON,
    GROUND_HEIGHT,
    JUMP_BUTTON,
    MARKER_INTERVAL,
    START_BUTTON,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .entities import Bird, Cactus, Cloud, Dino, Obstacle
from .scores import ScoreKeeper, display_points
from .utils import ground_marker_xs, scale_color, vertical_gradient
from .world import GameState, World


class Renderer:
    """Composes a frame from a read-only view of the world."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.font_big = pygame.font.SysFont(None, 56)
        self.font_small = pygame.font.SysFont(None, 26)
        self.background = pygame.surfarray.make_surface(
            vertical_gradient(WINDOW_WIDTH, WINDOW_HEIGHT, COL_BG_TOP, COL_BG_BOTTOM)
        )
        # Decoration for the title screen
        self.idle_clouds = [Cloud(100 + i * 200, 50 + i * 20, 80, 30) for i in range(3)]

    def draw(self, world: World, state: GameState, scores: ScoreKeeper) -> None:
        surf = self.surface
        surf.blit(self.background, (0, 0))
        speed = world.speed if state is not GameState.IDLE else 0.0
        self.draw_ground(surf, world.ticks, speed)

        clouds = self.idle_clouds if state is GameState.IDLE else world.clouds
        for cloud in clouds:
            self.draw_cloud(surf, cloud)
        self.draw_dino(surf, world.dino, world.ticks)
        for obs in world.obstacles:
            self.draw_obstacle(surf, obs, world.ticks)

        self.draw_controls(surf, world.dino)
        self.draw_hud(surf, scores)
        if state is GameState.IDLE:
            self.draw_panel(surf, "DINO RUN", "Space / Up to jump, Down to duck", "START")
        elif state is GameState.OVER:
            final = display_points(scores.current_score())
            self.draw_panel(surf, "GAME OVER", f"Score: {final}", "RESTART")

    def draw_ground(self, surf: pygame.Surface, ticks: int, speed: float) -> None:
        pygame.draw.line(surf, COL_GROUND, (0, GROUND_HEIGHT), (WINDOW_WIDTH, GROUND_HEIGHT), 1)
        for x in ground_marker_xs(ticks, speed, WINDOW_WIDTH, MARKER_INTERVAL):
            pygame.draw.rect(surf, COL_GROUND, (x, GROUND_HEIGHT, 1, 5))

    def draw_dino(self, surf: pygame.Surface, dino: Dino, ticks: int) -> None:
        for rect in dino.shape_rects(ticks):
            pygame.draw.rect(surf, COL_DINO, rect)

    def draw_obstacle(self, surf: pygame.Surface, obs: Obstacle, ticks: int) -> None:
        if isinstance(obs, Cactus):
            outline = obs.outline()
            pygame.draw.polygon(surf, COL_CACTUS_FILL, outline)
            pygame.draw.lines(surf, COL_CACTUS_EDGE, True, outline, 2)
            top, bottom = obs.spine()
            pygame.draw.line(surf, COL_CACTUS_EDGE, top, bottom, 1)
        elif isinstance(obs, Bird):
            for rect in obs.body_rects():
                pygame.draw.rect(surf, COL_BIRD, rect)
            pygame.draw.polygon(surf, COL_BIRD, obs.wing(ticks))

    def draw_cloud(self, surf: pygame.Surface, cloud: Cloud) -> None:
        outline = cloud.outline()
        pygame.draw.polygon(surf, COL_CLOUD_FILL, outline)
        pygame.draw.lines(surf, COL_CLOUD_EDGE, True, outline, 2)
        start, end = cloud.data_line()
        pygame.draw.line(surf, COL_CLOUD_LINE, start, end, 1)

    def draw_controls(self, surf: pygame.Surface, dino: Dino) -> None:
        for rect, label, held in ((JUMP_BUTTON, "JUMP", dino.airborne), (DUCK_BUTTON, "DUCK", dino.ducking)):
            color = scale_color(COL_BUTTON, 1.8) if held else COL_BUTTON
            pygame.draw.rect(surf, color, rect, border_radius=6)
            text = self.font_small.render(label, True, COL_TEXT_DIM)
            surf.blit(text, text.get_rect(center=pygame.Rect(rect).center))

    def draw_hud(self, surf: pygame.Surface, scores: ScoreKeeper) -> None:
        current = display_points(scores.current_score())
        best = display_points(max(scores.best_score(), scores.current_score()))
        text = self.font_small.render(f"HI {best:05d}   {current:05d}", True, COL_TEXT)
        surf.blit(text, text.get_rect(topright=(WINDOW_WIDTH - 16, 14)))

    def draw_panel(self, surf: pygame.Surface, title: str, subtitle: str, button: str) -> None:
        panel = pygame.Rect(0, 0, 360, 170)
        panel.center = (WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2)
        pygame.draw.rect(surf, COL_PANEL, panel, border_radius=10)
        pygame.draw.rect(surf, COL_GROUND, panel, 1, border_radius=10)

        title_text = self.font_big.render(title, True, COL_TEXT)
        surf.blit(title_text, title_text.get_rect(center=(panel.centerx, panel.top + 36)))
        sub_text = self.font_small.render(subtitle, True, COL_TEXT_DIM)
        surf.blit(sub_text, sub_text.get_rect(center=(panel.centerx, panel.top + 72)))

        pygame.draw.rect(surf, COL_BUTTON, START_BUTTON, border_radius=6)
        label = self.font_small.render(button, True, COL_TEXT)
        surf.blit(label, label.get_rect(center=pygame.Rect(START_BUTTON).center))
