"""Shared configuration for LANEDODGE."""
from pathlib import Path

from game_engine import WIDTH, HEIGHT

# Directories
PROJECT_DIR = Path(__file__).parent
RESULTS_DIR = PROJECT_DIR / "results"

# Game surface
CONTAINER_ID = "container"
GAME_WIDTH = WIDTH
GAME_HEIGHT = HEIGHT

# Tick timer: 10 ms nominal period. Ticks that fall further behind than
# MAX_CATCHUP_TICKS in one pump are dropped.
TICK_PERIOD = 0.01
MAX_CATCHUP_TICKS = 5

# Display backend: "pygame" or "headless"
DISPLAY_BACKEND = "pygame"

# Simulation settings
SIMS = 20
SIM_MAX_TICKS = 30_000

# File paths
SIM_RESULTS = RESULTS_DIR / "simulation.json"
