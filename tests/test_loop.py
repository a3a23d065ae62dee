import numpy as np  # type: ignore
import pytest

from snake.config import Direction
from snake.game import GameState, new_game_state
from snake.loop import GameLoop


@pytest.fixture
def game() -> GameLoop:
    return GameLoop(new_game_state(5, 5, np.random.default_rng(0)), move_interval=0.1)


def test_tick_waits_for_interval(game: GameLoop) -> None:
    assert game.update(0.06) is False
    assert game.state.head == (2, 2)
    assert game.update(0.06) is True
    assert game.state.head == (3, 2)
    assert game.state.move_timer == 0.0
    assert game.ticks == 1


def test_leftover_time_is_not_banked(game: GameLoop) -> None:
    assert game.update(1.0) is True
    assert game.ticks == 1
    assert game.state.move_timer == 0.0
    assert game.update(0.05) is False


def test_input_is_buffered_between_ticks(game: GameLoop) -> None:
    assert game.handle_direction(Direction.DOWN)
    assert not game.handle_direction(Direction.UP)
    game.update(0.1)
    assert game.state.head == (2, 3)


def test_game_over_resets_immediately() -> None:
    state = GameState(
        grid_w=5,
        grid_h=5,
        snake=[(4, 2), (3, 2), (2, 2)],
        direction=Direction.RIGHT,
        food=(0, 0),
        rng=np.random.default_rng(0),
    )
    game = GameLoop(state)
    assert game.update(0.1) is True
    assert game.games_played == 1
    assert list(game.state.snake) == [(2, 2), (1, 2), (0, 2)]
    assert game.state.food not in game.state.snake


def test_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        GameLoop(new_game_state(5, 5, np.random.default_rng(0)), move_interval=0)
