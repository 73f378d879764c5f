# -*- coding: utf-8 -*-
"""
Python implementation of a 2048 game session.

This module provides the `GameSession` class, which holds the board, the score and the end of game flag of one game.
"""

from .session import GameOverError, GameSession

__all__ = ["GameSession", "GameOverError"]
