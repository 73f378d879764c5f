"""
Core functionality for the 2048 game engine: board creation, tile spawning and end of game detection.
"""

from numpy import any as np_any
from numpy import argwhere, int64, ndarray, zeros
from numpy.random import Generator

from mergeboard.core.gamemove import BOARD_SIZE, check_board

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())


def new_board() -> ndarray:
    """
    Create an empty game board.

    Returns
    -------
    ndarray
        A ``BOARD_SIZE x BOARD_SIZE`` array filled with zeros.
    """
    return zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)


def spawn_tile(board: ndarray, rng: Generator) -> ndarray:
    """
    Add one new tile (2 or 4) on a random empty cell.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. It is not modified.
    rng : Generator
        Random source used to choose the cell and the tile value.

    Returns
    -------
    ndarray
        A new board with exactly one more tile, or an unchanged copy if the board is full.

    Notes
    -----
    - The cell is chosen uniformly among empty cells.
    - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
    - A full board is not necessarily finished, use ``has_moves`` for that.
    """
    state = check_board(board).copy()

    # ##: Only if there are still available places.
    available_cells = argwhere(state == 0)
    if len(available_cells) == 0:
        return state

    cell = available_cells[rng.integers(len(available_cells))]
    state[tuple(cell)] = rng.choice(_TILE_VALUES, p=_TILE_PROBS)
    return state


def fill_cells(board: ndarray, number_tile: int, rng: Generator) -> ndarray:
    """
    Add several new tiles, one after the other.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. It is not modified.
    number_tile : int
        Number of new tiles to add.
    rng : Generator
        Random source for the tiles.

    Returns
    -------
    ndarray
        A new board with up to ``number_tile`` more tiles.
    """
    state = check_board(board).copy()
    for _ in range(number_tile):
        state = spawn_tile(state, rng)
    return state


def has_moves(board: ndarray) -> bool:
    """
    Check if at least one move can still change the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the board has an empty cell or two equal neighbours in a row or a column.

    Notes
    -----
    Two equal neighbours or an empty cell is exactly the condition for one of the four moves to change the board.
    """
    state = check_board(board)
    return bool(
        np_any(state == 0) or np_any(state[:, :-1] == state[:, 1:]) or np_any(state[:-1] == state[1:])
    )


def is_done(board: ndarray) -> bool:
    """
    Check if the game has ended.

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.
    """
    return not has_moves(board)
