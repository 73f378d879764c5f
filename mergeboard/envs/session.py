"""2048 game session holding the board, the score and the end of game flag."""

import logging

from numpy import ndarray
from numpy.random import Generator, default_rng

from mergeboard.config import SessionConfig
from mergeboard.core.gameboard import fill_cells, has_moves, new_board, spawn_tile
from mergeboard.core.gamemove import Direction, apply_move, board_changed

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """Raised when a move is requested after the game has finished."""


class GameSession:
    """
    2048 game session.

    This class owns the mutable state of one game: the current board, the cumulative score and whether the game is
    finished. Every transition goes through the pure engine functions.
    """

    def __init__(self, config: SessionConfig | None = None):
        """
        Initialize the session and start a first game.

        Parameters
        ----------
        config : SessionConfig, optional
            Seed and number of initial tiles (default is ``SessionConfig()``).
        """
        self.config = config or SessionConfig()
        self._rng: Generator = default_rng(self.config.seed)
        self._board: ndarray = new_board()
        self._score = 0
        self._moves = 0
        self._finished = False

        self.reset(seed=self.config.seed)

    @property
    def board(self) -> ndarray:
        """Copy of the current game board."""
        return self._board.copy()

    @property
    def score(self) -> int:
        """Sum of all merge scores since the last reset."""
        return self._score

    @property
    def moves(self) -> int:
        """Number of accepted moves since the last reset."""
        return self._moves

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if no move could change the board after the last accepted move, False otherwise.
        """
        return self._finished

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Initialize an empty board and add the initial random tiles.

        Parameters
        ----------
        seed : int, optional
            Seed for a new random source. If None, the current random source keeps going.

        Returns
        -------
        ndarray
            The new game board.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self._board = fill_cells(new_board(), number_tile=self.config.initial_tiles, rng=self._rng)
        self._score = 0
        self._moves = 0
        self._finished = False

        logger.info('New game started with %d tiles', self.config.initial_tiles)
        return self.board

    def step(self, direction: Direction | int) -> tuple[ndarray, int, bool]:
        """
        Apply the selected move to the board.

        Parameters
        ----------
        direction : Direction or int
            The move to apply (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The updated game board (ndarray)
            - The score obtained from this move (int)
            - Whether the game has finished after this move (bool)

        Raises
        ------
        GameOverError
            If the game is already finished.

        Notes
        -----
        - A move that leaves the board unchanged is ignored: no new tile, no score.
        - After an accepted move, one tile is added and the end of game is checked on the resulting board.
        """
        if self._finished:
            raise GameOverError(f'Game is over with a score of {self._score}, reset to play again')

        direction = Direction(direction)
        moved, score = apply_move(self._board, direction)
        if not board_changed(self._board, moved):
            logger.debug('Move %s ignored, board unchanged', direction.name)
            return self.board, 0, False

        self._board = spawn_tile(moved, self._rng)
        self._score += score
        self._moves += 1
        self._finished = not has_moves(self._board)

        logger.debug('Move %s scored %d, total %d', direction.name, score, self._score)
        if self._finished:
            logger.info('Game over after %d moves with a score of %d', self._moves, self._score)
        return self.board, score, self._finished

    def render(self) -> str:
        """
        Render the game board as text, one row per line followed by the score.

        Returns
        -------
        str
            The printable board.
        """
        lines = [' \t'.join(str(value) if value else '.' for value in row) for row in self._board.tolist()]
        lines.append(f'Score: {self._score}')
        return '\n'.join(lines)
