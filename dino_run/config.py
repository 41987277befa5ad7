from __future__ import annotations

"""Game configuration constants for Dino Run."""

import os
from pathlib import Path

# Game configuration
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 400
FPS = 60

# Physics (per tick, one tick per frame)
GRAVITY = 0.6  # px/tick^2
JUMP_STRENGTH = -12.0  # px/tick
GROUND_HEIGHT = 350  # y of the ground line

# Scroll speed
GAME_SPEED_INITIAL = 6.0  # px/tick
GAME_SPEED_INCREMENT = 0.002  # px/tick added every tick

# Spawning
MIN_GAP_MULTIPLIER = 50
MAX_GAP_MULTIPLIER = 100
CLUSTER_GAP = 5  # px between the nominal widths of clustered cacti
CLOUD_INTERVAL = 150  # ticks between clouds
CLOUD_SPEED = 1.0  # px/tick, independent of scroll speed

# Score gates for harder patterns
BIRD_SCORE = 500
TRIPLE_CACTUS_SCORE = 1000
DOUBLE_CACTUS_SCORE = 300
TICKS_PER_POINT = 10

# Dino
DINO_X = 50
DINO_WIDTH = 44
DINO_HEIGHT = 47
DINO_DUCK_HEIGHT = 30

# Obstacles
CACTUS_WIDTH = 25
CACTUS_HEIGHT = 50
CACTUS_WIDTH_VARIANCE = 10
CACTUS_HEIGHT_VARIANCE = 15
BIRD_WIDTH = 46
BIRD_HEIGHT = 40

# Player hitbox forgiveness on every side
COLLISION_TOLERANCE = 5

# Ground markers
MARKER_INTERVAL = 100

# Palette (blueprint wireframe on near-black)
COL_BG_TOP = (16, 16, 18)
COL_BG_BOTTOM = (4, 4, 6)
COL_DINO = (212, 212, 212)
COL_CACTUS_FILL = (17, 17, 17)
COL_CACTUS_EDGE = (212, 212, 212)
COL_BIRD = (170, 170, 170)
COL_CLOUD_FILL = (10, 10, 10)
COL_CLOUD_EDGE = (68, 68, 68)
COL_CLOUD_LINE = (34, 34, 34)
COL_GROUND = (68, 68, 68)
COL_TEXT = (212, 212, 212)
COL_TEXT_DIM = (120, 120, 130)
COL_PANEL = (12, 12, 14)
COL_BUTTON = (36, 36, 40)

# On-screen controls, (x, y, w, h) in field coordinates
START_BUTTON = (WINDOW_WIDTH // 2 - 80, WINDOW_HEIGHT // 2 + 10, 160, 44)
JUMP_BUTTON = (WINDOW_WIDTH - 190, GROUND_HEIGHT + 8, 84, 36)
DUCK_BUTTON = (WINDOW_WIDTH - 96, GROUND_HEIGHT + 8, 84, 36)

# Environment overrides
SCORE_FILE = Path(os.environ.get("DINO_RUN_SCORE_FILE", Path.home() / ".dino_run_best.json"))
LOG_LEVEL = os.environ.get("DINO_RUN_LOG_LEVEL", "INFO").upper()
