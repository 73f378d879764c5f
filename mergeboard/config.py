# -*- coding: utf-8 -*-
"""
Session configuration.
"""
from dataclasses import dataclass


@dataclass
class SessionConfig:
    """Data needed to start a game session."""

    seed: int | None = None  # None draws fresh entropy
    initial_tiles: int = 2  # Tiles placed on the empty board at reset
