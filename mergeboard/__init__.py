# -*- coding: utf-8 -*-
"""
Deterministic game engine for the 2048 sliding-tile puzzle.
"""

from mergeboard.core import Direction, apply_move, has_moves, new_board, spawn_tile
from mergeboard.envs import GameOverError, GameSession

__all__ = ["Direction", "new_board", "spawn_tile", "apply_move", "has_moves", "GameSession", "GameOverError"]
