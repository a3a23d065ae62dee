# main.py
import argparse
import logging

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import CFG, Config, Direction, FPS
from .game import new_game_state
from .loop import GameLoop
from .render import draw_game

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def handle_input(game: GameLoop) -> bool:
    """Feed key-press edges to the direction queue. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            direction = KEY_TO_DIRECTION.get(event.key)
            if direction is not None:
                game.handle_direction(direction)
    return True


def parse_args(argv=None) -> Config:
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument("--grid-width", type=int, default=CFG.grid_w)
    parser.add_argument("--grid-height", type=int, default=CFG.grid_h)
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return Config(seed=args.seed, grid_w=args.grid_width, grid_h=args.grid_height)
    except ValueError as e:
        parser.error(str(e))


def main(argv=None):
    cfg = parse_args(argv)

    # One generator for the whole session
    rng = np.random.default_rng(cfg.seed)
    game = GameLoop(new_game_state(cfg.grid_w, cfg.grid_h, rng), cfg.move_interval)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((cfg.width, cfg.height), pygame.RESIZABLE)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()
    logger.info("Started %dx%d game, seed=%d", cfg.grid_w, cfg.grid_h, cfg.seed)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        # 1) input
        running = handle_input(game)
        if not running:
            break

        # 2) update (gated on the move interval)
        game.update(dt)

        # 3) render
        draw_game(screen, game.state, font)
        pygame.display.flip()

    logger.info(
        "Session over: %d games, %d ticks, best length %d",
        game.games_played, game.ticks, game.best_length,
    )
    pygame.quit()


if __name__ == "__main__":
    main()
