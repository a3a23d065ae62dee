# game.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from itertools import islice
from typing import Deque, Iterable, Optional, Tuple
import logging

import numpy as np  # type: ignore

from .config import Direction, is_opposite, MAX_QUEUED, MIN_GRID, START_LENGTH

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# Returned by place_food when the snake covers the whole grid.
NO_FREE_CELL: Cell = (0, 0)


# ---------- Helpers ----------
def place_food(snake: Iterable[Cell], grid_w: int, grid_h: int,
               rng: np.random.Generator) -> Cell:
    """
    Pick a free cell uniformly at random.

    Free cells are enumerated row by row, so a given rng draw always maps to the
    same cell for the same board. If nothing is free, NO_FREE_CELL is returned.
    """
    occupied = set(snake)
    free = [(x, y) for y in range(grid_h) for x in range(grid_w) if (x, y) not in occupied]
    if not free:
        logger.warning("No free cell for food on a %dx%d grid", grid_w, grid_h)
        return NO_FREE_CELL
    return free[int(rng.integers(len(free)))]


def in_bounds(cell: Cell, grid_w: int, grid_h: int) -> bool:
    x, y = cell
    return 0 <= x < grid_w and 0 <= y < grid_h


# ---------- State ----------
@dataclass
class GameState:
    grid_w: int
    grid_h: int
    snake: Deque[Cell]                     # head at index 0
    direction: Optional[Direction]         # committed heading; None until first reset
    food: Cell
    rng: np.random.Generator
    pending: Deque[Direction] = field(default_factory=deque)
    move_timer: float = 0.0                # seconds since last tick

    def __post_init__(self):
        self.snake = deque(self.snake)
        self.pending = deque(self.pending)

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)


def new_game_state(grid_w: int, grid_h: int, rng: np.random.Generator,
                   direction: Optional[Direction] = None) -> GameState:
    if grid_w < MIN_GRID or grid_h < MIN_GRID:
        raise ValueError(f"Grid must be at least {MIN_GRID}x{MIN_GRID}, got {grid_w}x{grid_h}")
    state = GameState(
        grid_w=grid_w,
        grid_h=grid_h,
        snake=deque(),
        direction=direction,
        food=NO_FREE_CELL,
        rng=rng,
    )
    reset_game(state)
    return state


def reset_game(state: GameState) -> None:
    """
    Respawn a 3-cell snake at the grid center, trailing away from the committed
    heading, and drop fresh food. Grid size and rng are kept.
    """
    if state.direction is None:
        state.direction = Direction.RIGHT

    cx, cy = state.grid_w // 2, state.grid_h // 2
    bx, by = state.direction.opposite.offset
    state.snake = deque((cx + bx * i, cy + by * i) for i in range(START_LENGTH))
    state.pending.clear()
    state.move_timer = 0.0
    state.food = place_food(state.snake, state.grid_w, state.grid_h, state.rng)


# ---------- Input / Update ----------
def queue_direction(state: GameState, new_direction: Direction) -> bool:
    """
    Buffer a turn for a later tick. Each entry must be a legal turn relative to
    the heading that will be active when it is consumed, i.e. the last queued
    entry, or the committed direction if the queue is empty.
    Returns False when the request is dropped.
    """
    if len(state.pending) >= MAX_QUEUED:
        logger.debug("Queue full, dropping %s", new_direction.name)
        return False
    if state.pending and state.pending[-1] is new_direction:
        return False

    reference = state.pending[-1] if state.pending else state.direction
    if reference is not None and is_opposite(reference, new_direction):
        logger.debug("Rejecting reversal %s -> %s", reference.name, new_direction.name)
        return False

    state.pending.append(new_direction)
    return True


def step_game(state: GameState) -> bool:
    """
    Advance the snake by one cell.
    Returns True on game over (wall or body hit); the body is left untouched so
    the caller can inspect it before resetting.
    """
    # Commit the next buffered turn, if any
    if state.pending:
        state.direction = state.pending.popleft()
    if state.direction is None:
        state.direction = Direction.RIGHT

    hx, hy = state.head
    dx, dy = state.direction.offset
    new_head = (hx + dx, hy + dy)

    # Wall collision
    if not in_bounds(new_head, state.grid_w, state.grid_h):
        return True

    # Self collision; the tail moves out of the way unless we are about to grow
    eats = new_head == state.food
    body = state.snake if eats else islice(state.snake, len(state.snake) - 1)
    if new_head in body:
        return True

    state.snake.appendleft(new_head)
    if eats:
        state.food = place_food(state.snake, state.grid_w, state.grid_h, state.rng)
        logger.debug("Ate food at %s, length=%d", new_head, len(state.snake))
    else:
        state.snake.pop()
    return False
