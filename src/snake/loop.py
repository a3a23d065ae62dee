# loop.py
from __future__ import annotations
import logging

from .config import Direction, MOVE_INTERVAL
from .game import GameState, queue_direction, reset_game, step_game

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Fixed-cadence driver around a GameState.

    Input is taken every frame; the simulation only advances once the
    accumulated frame time reaches move_interval. Leftover time is discarded
    on each tick rather than carried over.
    """

    def __init__(self, state: GameState, move_interval: float = MOVE_INTERVAL):
        if move_interval <= 0:
            raise ValueError(f"move_interval must be positive, got {move_interval}")
        self.state = state
        self.move_interval = move_interval
        self.ticks = 0
        self.games_played = 0
        self.best_length = state.length

    def handle_direction(self, direction: Direction) -> bool:
        return queue_direction(self.state, direction)

    def update(self, dt: float) -> bool:
        """Accumulate dt seconds; return True if a simulation tick fired."""
        self.state.move_timer += dt
        if self.state.move_timer < self.move_interval:
            return False

        self.state.move_timer = 0.0
        self.ticks += 1
        if step_game(self.state):
            self.games_played += 1
            logger.info("Game %d over at %s, length=%d", self.games_played, self.state.head, self.state.length)
            reset_game(self.state)
        else:
            self.best_length = max(self.best_length, self.state.length)
        return True
