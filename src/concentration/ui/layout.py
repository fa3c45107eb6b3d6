from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from concentration.constants import BOARD_MAX_HEIGHT_PCT, BOARD_MAX_WIDTH_PCT, HEADER_HEIGHT, TILE_SPACING

# (max tiles, columns, rows); boards above the last bound use a 6x5 grid.
GRID_SHAPES: Tuple[Tuple[int, int, int], ...] = (
    (8, 4, 2),
    (12, 4, 3),
    (16, 4, 4),
    (20, 5, 4),
)
LARGEST_GRID = (6, 5)

HINT_BUTTON_WIDTH = 110
HINT_BUTTON_HEIGHT = 36


def grid_shape(tile_count: int) -> Tuple[int, int]:
    """Return (columns, rows) for a board of ``tile_count`` tiles."""
    for limit, cols, rows in GRID_SHAPES:
        if tile_count <= limit:
            return cols, rows
    return LARGEST_GRID


@dataclass(slots=True)
class BoardGeometry:
    cols: int
    rows: int
    tile_width: float
    tile_height: float
    left: float
    top: float

    def tile_rect(self, index: int) -> Tuple[float, float, float, float]:
        """(left, bottom, width, height) of the tile at board ``index``; row 0 is the top row."""
        col = index % self.cols
        row = index // self.cols
        left = self.left + TILE_SPACING + col * (self.tile_width + TILE_SPACING)
        top = self.top - TILE_SPACING - row * (self.tile_height + TILE_SPACING)
        return left, top - self.tile_height, self.tile_width, self.tile_height

    def index_at(self, x: float, y: float, tile_count: int) -> Optional[int]:
        for index in range(tile_count):
            left, bottom, width, height = self.tile_rect(index)
            if left <= x <= left + width and bottom <= y <= bottom + height:
                return index
        return None


def compute_board_geometry(window_width: int, window_height: int, tile_count: int) -> BoardGeometry:
    """Fit the grid for ``tile_count`` tiles below the header strip, centred horizontally."""
    cols, rows = grid_shape(tile_count)
    board_w = window_width * BOARD_MAX_WIDTH_PCT
    board_h = (window_height - HEADER_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    tile_w = max(10.0, (board_w - (cols + 1) * TILE_SPACING) / cols)
    tile_h = max(10.0, (board_h - (rows + 1) * TILE_SPACING) / rows)
    left = (window_width - board_w) / 2
    top = window_height - HEADER_HEIGHT
    return BoardGeometry(cols=cols, rows=rows, tile_width=tile_w, tile_height=tile_h, left=left, top=top)


def hint_button_rect(window_width: int, window_height: int) -> Tuple[float, float, float, float]:
    """(left, bottom, width, height) of the hint button in the header's right corner."""
    left = window_width - HINT_BUTTON_WIDTH - TILE_SPACING
    bottom = window_height - (HEADER_HEIGHT + HINT_BUTTON_HEIGHT) / 2
    return left, bottom, HINT_BUTTON_WIDTH, HINT_BUTTON_HEIGHT
