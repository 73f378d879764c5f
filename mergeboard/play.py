# -*- coding: utf-8 -*-
"""
Play 2048 Game in the terminal.
"""
import argparse
import logging
from typing import Callable

from mergeboard.config import SessionConfig
from mergeboard.core.gamemove import Direction
from mergeboard.envs import GameOverError, GameSession

# ##: Keyboard shortcuts for direction names.
KEYS = {
    'w': 'up',
    'a': 'left',
    's': 'down',
    'd': 'right',
}


def redraw(session: GameSession, output: Callable[[str], None]):
    """
    Redraw the game board.

    Parameters
    ----------
    session: GameSession
        The game session

    output: Callable
        Function used to print the board
    """
    output(session.render())


def step(session: GameSession, output: Callable[[str], None], action: Direction):
    """
    Applied action into the game.

    Parameters
    ----------
    session: GameSession
        The game session

    output: Callable
        Function used to print the board

    action: Direction
        Action to apply
    """
    try:
        _, reward, terminated = session.step(action)
    except GameOverError:
        output("game over, press r to restart")
        return

    output(f"reward={reward}")
    redraw(session, output)
    if terminated:
        output("terminated!")


def key_handler(session: GameSession, output: Callable[[str], None], key: str) -> bool:
    """
    Handle one keyboard entry.

    Parameters
    ----------
    session: GameSession
        The game session

    output: Callable
        Function used to print the board

    key: str
        Entry to handle

    Returns
    -------
    bool
        False when the player quits, True otherwise.
    """
    key = key.strip().lower()

    if key == "q":
        return False

    if key == "r":
        session.reset()
        redraw(session, output)
        return True

    try:
        action = Direction.from_name(KEYS.get(key, key))
    except ValueError:
        output(f"unknown key {key!r}, use w/a/s/d, r or q")
        return True

    step(session, output, action)
    return True


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line options."""
    parser = argparse.ArgumentParser(description="Play 2048 in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random tiles.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, read: Callable[[str], str] = input, output: Callable[[str], None] = print):
    """Run the blocking game loop until the player quits."""
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    session = GameSession(SessionConfig(seed=args.seed))
    redraw(session, output)

    while True:
        try:
            key = read("move (w/a/s/d, r: reset, q: quit)> ")
        except (EOFError, KeyboardInterrupt):
            break
        if not key_handler(session, output, key):
            break

    output(f"Final score: {session.score}")


if __name__ == "__main__":
    main()
