from __future__ import annotations

from typing import TYPE_CHECKING

import arcade

from concentration.ui.layout import compute_board_geometry, hint_button_rect

if TYPE_CHECKING:
    from concentration.systems.session_system import SessionSystem

BACK_COLOR = (40, 90, 190)
FACE_COLOR = (245, 245, 240)
MATCHED_COLOR = (200, 235, 200)
BORDER_COLOR = (20, 30, 60)
TEXT_COLOR = (20, 20, 20)
HEADER_TEXT_COLOR = (255, 255, 255)
BUTTON_COLOR = (255, 149, 0)
HINT_ALPHA = 102


class BoardRenderer:
    """Draws tiles straight from their logical flags; owns no game state."""

    def __init__(self, session_system: SessionSystem):
        self.sessions = session_system
        self.hinted: tuple[int, ...] = ()

    def draw(self, window_width: int, window_height: int) -> None:
        self._draw_header(window_width, window_height)
        tiles = self.sessions.tiles()
        if not tiles:
            return
        geometry = compute_board_geometry(window_width, window_height, len(tiles))
        for index, (tile_id, tile) in enumerate(tiles):
            left, bottom, width, height = geometry.tile_rect(index)
            if tile.matched:
                fill = MATCHED_COLOR
            elif tile.revealed:
                fill = FACE_COLOR
            else:
                fill = BACK_COLOR
            if tile_id in self.hinted:
                fill = (*fill, HINT_ALPHA)
            arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, fill)
            arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, BORDER_COLOR, border_width=2)
            if tile.revealed:
                arcade.draw_text(
                    tile.content,
                    left + width / 2,
                    bottom + height / 2,
                    TEXT_COLOR,
                    int(min(width, height) * 0.45),
                    anchor_x="center",
                    anchor_y="center",
                )

    def _draw_header(self, window_width: int, window_height: int) -> None:
        level = self.sessions.level
        if level:
            arcade.draw_text(
                f"Level {level}/{self.sessions.config.max_level}",
                window_width / 2,
                window_height - 30,
                HEADER_TEXT_COLOR,
                24,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
        left, bottom, width, height = hint_button_rect(window_width, window_height)
        arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, BUTTON_COLOR, border_width=2)
        arcade.draw_text(
            "HINT",
            left + width / 2,
            bottom + height / 2,
            BUTTON_COLOR,
            18,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
