# geometry.py
from typing import Tuple

from .config import BORDER_THICKNESS


def cell_size(grid_w: int, grid_h: int, viewport_w: int, viewport_h: int,
              border: int = BORDER_THICKNESS) -> int:
    """
    Largest square cell that fits the grid inside the viewport on both axes,
    leaving room for the border. May be <= 0 for tiny viewports; callers that
    draw must clamp.
    """
    cell_w = (viewport_w - border * 2) // grid_w
    cell_h = (viewport_h - border * 2) // grid_h
    return min(cell_w, cell_h)


def grid_offset(grid_w: int, grid_h: int, cell: int,
                viewport_w: int, viewport_h: int) -> Tuple[int, int]:
    """Top-left pixel of the grid so that it sits centered in the viewport."""
    return (viewport_w - cell * grid_w) // 2, (viewport_h - cell * grid_h) // 2


def cell_rect(gx: int, gy: int, cell: int, offset: Tuple[int, int]) -> Tuple[int, int, int, int]:
    ox, oy = offset
    return (ox + gx * cell, oy + gy * cell, cell, cell)
