from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# ----- Window & grid -----
SCREEN_WIDTH, SCREEN_HEIGHT = 800, 450
GRID_W, GRID_H = 25, 25
BORDER_THICKNESS = 2
FPS = 60

# ----- Simulation -----
MOVE_INTERVAL = 0.1   # seconds per tick
MAX_QUEUED = 3        # pending direction changes
START_LENGTH = 3
MIN_GRID = 2 * START_LENGTH - 1  # room for a fresh snake facing any way

# ----- Colors (RGBA) -----
BG            = (245, 245, 245, 255)
BORDER_COLOR  = (0, 0, 0, 255)
BORDER_BG     = (160, 255, 112, 255)
SNAKE_HEAD    = (71, 130, 255, 255)
FOOD          = (230, 41, 55, 255)
TEXT          = (20, 20, 24, 255)


# ----- Directions -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> Tuple[int, int]:
        """(dx, dy) step on the grid; y grows downwards."""
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite is b


# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    grid_w: int = GRID_W
    grid_h: int = GRID_H
    move_interval: float = MOVE_INTERVAL
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT

    def __post_init__(self):
        if self.grid_w < MIN_GRID or self.grid_h < MIN_GRID:
            raise ValueError(f"Grid must be at least {MIN_GRID}x{MIN_GRID}, got {self.grid_w}x{self.grid_h}")
        if self.move_interval <= 0:
            raise ValueError(f"move_interval must be positive, got {self.move_interval}")


CFG = Config()
