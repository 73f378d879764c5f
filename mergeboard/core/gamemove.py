"""
Move utilities for the 2048 game engine: line collapse, board transforms and directional moves.
"""

from enum import IntEnum

from numpy import array_equal, asarray, int64, integer, issubdtype, ndarray, zeros_like
from numpy.typing import ArrayLike

BOARD_SIZE = 4


class Direction(IntEnum):
    """
    Move directions accepted by the engine.

    The integer values follow the action indices used by the environment (0: left, 1: up, 2: right, 3: down).
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def from_name(cls, name: str) -> 'Direction':
        """
        Look up a direction by its case-insensitive name.

        Raises
        ------
        ValueError
            If the name is not one of left, up, right, down.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError as error:
            raise ValueError(f'Unknown direction: {name!r}') from error


# ##>: Geometric transforms applied around the leftward move: (transpose, reverse rows).
_TRANSFORMS: dict[Direction, tuple[bool, bool]] = {
    Direction.LEFT: (False, False),
    Direction.UP: (True, False),
    Direction.RIGHT: (False, True),
    Direction.DOWN: (True, True),
}


def check_board(board: ArrayLike) -> ndarray:
    """
    Validate the board shape and return it as an integer array.

    Parameters
    ----------
    board : array_like
        A square grid of tile values.

    Returns
    -------
    ndarray
        The board as a ``BOARD_SIZE x BOARD_SIZE`` int64 array. The input is never modified.

    Raises
    ------
    ValueError
        If the board is not ``BOARD_SIZE x BOARD_SIZE`` or does not hold integers.
    """
    state = asarray(board)
    if state.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f'Board must have shape {(BOARD_SIZE, BOARD_SIZE)}, got {state.shape}')
    return _as_tiles(state)


def _check_line(line: ArrayLike) -> ndarray:
    values = asarray(line)
    if values.shape != (BOARD_SIZE,):
        raise ValueError(f'Line must have length {BOARD_SIZE}, got shape {values.shape}')
    return _as_tiles(values)


def _as_tiles(values: ndarray) -> ndarray:
    if not issubdtype(values.dtype, integer):
        raise ValueError(f'Tile values must be integers, got dtype {values.dtype}')
    return values.astype(int64, copy=False)


def compress(line: ArrayLike) -> ndarray:
    """
    Remove the empty cells of a line, keeping the order of the tiles, and pad with zeros on the right.

    Parameters
    ----------
    line : array_like
        One row or column of the board.

    Returns
    -------
    ndarray
        A new line of length ``BOARD_SIZE``.
    """
    values = _check_line(line)
    result = zeros_like(values)
    non_zero = values[values != 0]
    result[: len(non_zero)] = non_zero
    return result


def merge_line(line: ArrayLike) -> tuple[int, ndarray]:
    """
    Merge adjacent equal tiles of a compressed line in a single left-to-right pass.

    Parameters
    ----------
    line : array_like
        A line whose tiles are already packed to the left.

    Returns
    -------
    score : int
        Sum of the tiles created by merges.
    merged_line : ndarray
        The line after merging, compressed again.

    Notes
    -----
    - A merged tile cannot merge again in the same pass: [2, 2, 2, 2] gives [4, 4, 0, 0].
    - A line with no equal adjacent non-zero pair comes back unchanged with a score of 0. A merged line can still
      hold such a pair: [4, 4, 0, 0] gives [8, 0, 0, 0].
    """
    result = _check_line(line).copy()
    score = 0

    for i in range(BOARD_SIZE - 1):
        if result[i] != 0 and result[i] == result[i + 1]:
            result[i] *= 2
            result[i + 1] = 0
            score += int(result[i])

    return score, compress(result)


def collapse_line(line: ArrayLike) -> tuple[int, ndarray]:
    """
    Slide a line to the left and merge its tiles.

    Parameters
    ----------
    line : array_like
        One row of the board (or a column, once transposed).

    Returns
    -------
    score : int
        The score obtained from merging.
    collapsed_line : ndarray
        The new line configuration.
    """
    return merge_line(compress(line))


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        The updated game board after sliding and merging.

    Notes
    -----
    For other directions, transform the board before calling this function.
    """
    state = check_board(board)
    result = zeros_like(state)
    score = 0

    for i, row in enumerate(state):
        score_row, result[i] = collapse_line(row)
        score += score_row

    return score, result


def transpose(board: ndarray) -> ndarray:
    """Swap rows and columns. Applying it twice gives back the original board."""
    return check_board(board).T.copy()


def reverse_rows(board: ndarray) -> ndarray:
    """Reverse the order of the cells inside each row. Applying it twice gives back the original board."""
    return check_board(board)[:, ::-1].copy()


def apply_move(board: ndarray, direction: Direction | int) -> tuple[ndarray, int]:
    """
    Apply a directional move to the board, without adding a new tile.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. It is not modified.
    direction : Direction or int
        The move to apply (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    new_board : ndarray
        The board after the move.
    score : int
        The sum of the tiles created by merges.

    Notes
    -----
    Every direction reuses the leftward move: the board is transposed and/or its rows reversed, moved to the left,
    then the transforms are undone in the opposite order.
    """
    use_transpose, use_reverse = _TRANSFORMS[Direction(direction)]

    state = check_board(board)
    if use_transpose:
        state = transpose(state)
    if use_reverse:
        state = reverse_rows(state)

    score, state = slide_and_merge(state)

    if use_reverse:
        state = reverse_rows(state)
    if use_transpose:
        state = transpose(state)
    return state, score


def board_changed(before: ndarray, after: ndarray) -> bool:
    """Check whether two boards differ in at least one cell."""
    return not array_equal(check_board(before), check_board(after))


def can_move(board: ndarray, direction: Direction | int) -> bool:
    """
    Check if a move in the given direction changes the board.

    Parameters
    ----------
    board : ndarray
        The game board to check.
    direction : Direction or int
        Direction to check (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    bool
        True if the move is possible, False otherwise.
    """
    moved, _ = apply_move(board, direction)
    return board_changed(board, moved)


def legal_actions(state: ndarray) -> list[Direction]:
    """
    Determine legal actions for the current game board state.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        The directions whose move changes the game board.
    """
    return [direction for direction in Direction if can_move(state, direction)]


def illegal_actions(state: ndarray) -> list[Direction]:
    """
    Determine illegal actions for the current game board state.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        The directions whose move leaves the game board unchanged.
    """
    return [direction for direction in Direction if not can_move(state, direction)]
