# -*- coding: utf-8 -*-
"""
This module provides the pure game engine of a 2048-like game.

It includes functions for creating a board, sliding and merging tiles in the four directions,
spawning random tiles and checking if the game is done.
"""

from .gameboard import TILE_SPAWN_PROBS, fill_cells, has_moves, is_done, new_board, spawn_tile
from .gamemove import (
    BOARD_SIZE,
    Direction,
    apply_move,
    board_changed,
    can_move,
    collapse_line,
    compress,
    illegal_actions,
    legal_actions,
    merge_line,
    reverse_rows,
    slide_and_merge,
    transpose,
)

__all__ = [
    "BOARD_SIZE",
    "TILE_SPAWN_PROBS",
    "Direction",
    "new_board",
    "spawn_tile",
    "fill_cells",
    "apply_move",
    "board_changed",
    "has_moves",
    "is_done",
    "can_move",
    "legal_actions",
    "illegal_actions",
    "compress",
    "merge_line",
    "collapse_line",
    "slide_and_merge",
    "transpose",
    "reverse_rows",
]
