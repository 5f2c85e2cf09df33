"""
cli.py - Terminal front end for Connect Four

This module provides the two capabilities the game loop consumes: a prompt
that keeps asking until it gets one of the accepted answers, and a renderer
that prints the board.
"""

from typing import Callable, List, Sequence

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.match import MatchResult, MatchSession
from connectfour.utils import DEFAULT_PLAYERS, NO_ANSWERS, YES_ANSWERS


def get_input(info: str, retry_text: str, valid_input: Sequence[str],
              read_line: Callable[[], str] = input,
              write: Callable[[str], None] = print) -> str:
    """
    Ask a question and read lines until one is an accepted answer.

    Answers are compared case-insensitively after stripping surrounding
    whitespace.

    Args:
        info: Question shown once before the first read
        retry_text: Message shown after every rejected line
        valid_input: Accepted answers
        read_line: Source of input lines
        write: Sink for messages

    Returns:
        The accepted answer, lower-cased
    """
    write(info)
    valid_input = [value.lower() for value in valid_input]

    while True:
        answer = read_line().strip().lower()
        if answer in valid_input:
            return answer
        debug.debug(f"Rejected input {answer!r}; expected one of {valid_input}", "cli")
        write(retry_text)


def render_board(board: Board, write: Callable[[str], None] = print) -> None:
    """Print the board with a blank line above it."""
    write("")
    write(board.render())


class SimpleCLI:
    """Plays Connect Four sessions on the terminal."""

    def __init__(self, read_line: Callable[[], str] = input,
                 write: Callable[[str], None] = print):
        self.read_line = read_line
        self.write = write

    def prompt(self, info: str, retry_text: str, valid_input: Sequence[str]) -> str:
        return get_input(info, retry_text, valid_input, self.read_line, self.write)

    def render(self, board: Board) -> None:
        render_board(board, self.write)

    def play(self, player1: str = DEFAULT_PLAYERS[0],
             player2: str = DEFAULT_PLAYERS[1],
             yes: Sequence[str] = YES_ANSWERS,
             no: Sequence[str] = NO_ANSWERS) -> List[MatchResult]:
        """Run a session until the players stop asking for rematches."""
        self.write("Starting a new Connect Four game!")
        self.write(f"{player1} plays first. Enter a column number (1-7) to drop a piece.")
        session = MatchSession(self.prompt, self.render, player1, player2, yes, no)
        results = session.start()
        self.write("Thanks for playing!")
        return results
