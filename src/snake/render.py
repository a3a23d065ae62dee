# render.py
from typing import Optional, Tuple
import pygame  # type: ignore

from .config import BG, BORDER_BG, BORDER_COLOR, BORDER_THICKNESS, FOOD, SNAKE_HEAD, TEXT
from .game import GameState
from .geometry import cell_rect, cell_size, grid_offset


def segment_color(index: int, length: int) -> pygame.Color:
    """Head color faded linearly towards black along the body."""
    factor = (length - index) * 255 // length
    r, g, b, _ = SNAKE_HEAD
    return pygame.Color(r * factor // 255, g * factor // 255, b * factor // 255, 255)


def draw_cell(screen: pygame.Surface, gx: int, gy: int, cell: int,
              offset: Tuple[int, int], color) -> None:
    pygame.draw.rect(screen, color, pygame.Rect(cell_rect(gx, gy, cell, offset)))


def draw_game(screen: pygame.Surface, state: GameState,
              font: Optional[pygame.font.Font] = None) -> None:
    screen.fill(pygame.Color(*BG))

    width, height = screen.get_size()
    # Tiny windows still get something visible
    cell = max(1, cell_size(state.grid_w, state.grid_h, width, height))
    offset = grid_offset(state.grid_w, state.grid_h, cell, width, height)

    # border: filled play area plus outline
    frame = pygame.Rect(
        offset[0] - BORDER_THICKNESS,
        offset[1] - BORDER_THICKNESS,
        cell * state.grid_w + BORDER_THICKNESS * 2,
        cell * state.grid_h + BORDER_THICKNESS * 2,
    )
    pygame.draw.rect(screen, pygame.Color(*BORDER_BG), frame)
    pygame.draw.rect(screen, pygame.Color(*BORDER_COLOR), frame, width=BORDER_THICKNESS)

    # food
    draw_cell(screen, state.food[0], state.food[1], cell, offset, pygame.Color(*FOOD))

    # snake
    length = len(state.snake)
    for i, (x, y) in enumerate(state.snake):
        draw_cell(screen, x, y, cell, offset, segment_color(i, length))

    if font is not None:
        txt = font.render(f"Length: {length}", True, pygame.Color(*TEXT))
        screen.blit(txt, (8, 6))
