"""
match.py - Turn loop and rematch session for Connect Four

TurnController runs a single match as a small state machine. MatchSession
wraps it in the "play again?" loop. Neither talks to a terminal: both get a
prompt function and a render function handed in, so a match can be driven by
a script as easily as by a person.
"""

from enum import Enum, auto
from typing import Any, Callable, List, NamedTuple, Optional, Sequence

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.rules import check_for_winner
from connectfour.utils import DEFAULT_PLAYERS, NO_ANSWERS, YES_ANSWERS

# prompt(message, retry_message, accepted_values) -> accepted value
PromptFn = Callable[[str, str, Sequence[str]], str]
# render(board) -> None
RenderFn = Callable[[Board], None]

TURN_RETRY_TEXT = "Invalid input. Enter a number between one and seven."


class TurnState(Enum):
    AWAITING_MOVE = auto()
    BOARD_UPDATED = auto()
    WIN_CHECK = auto()
    MATCH_OVER = auto()


class MatchResult(NamedTuple):
    """
    How a match ended.

    For a draw, winner and loser hold the first and second player of the
    finished match so a rematch can keep the same order.
    """
    winner: Any
    loser: Any
    draw: bool = False


class TurnController:
    """Plays one match between two players."""

    def __init__(self, prompt: PromptFn, render: RenderFn):
        self.prompt = prompt
        self.render = render
        self.state = TurnState.AWAITING_MOVE
        self.current_player = None

    def _transition(self, state: TurnState) -> None:
        debug.trace(f"{self.state.name} -> {state.name}", "match")
        self.state = state

    def take_turn(self, board: Board, player: Any) -> Board:
        """
        Ask a player for a column and drop their piece into it.

        Only columns with room are offered, so the answer can go straight to
        the board.
        """
        choice = self.prompt(f"{player}'s turn. Pick a column.",
                             TURN_RETRY_TEXT,
                             board.available_columns())
        column = int(choice) - 1
        debug.debug(f"{player} picked column {choice}", "match")
        return board.drop(player, column)

    def play(self, player1: Any, player2: Any, board: Optional[Board] = None) -> MatchResult:
        """
        Play a match to the end.

        Args:
            player1: Mark of the player who moves first
            player2: Mark of the other player
            board: Starting board; a new empty board when omitted

        Returns:
            MatchResult naming the winner and loser, or a draw
        """
        board = Board.empty() if board is None else board
        players = (player1, player2)
        turn = 0
        self.state = TurnState.AWAITING_MOVE
        debug.info(f"New match: {player1} vs {player2}", "match")

        while True:
            self.current_player = players[turn % 2]
            if board.is_full():
                self._transition(TurnState.MATCH_OVER)
                debug.info("Board is full with no winner; match drawn", "match")
                return MatchResult(player1, player2, draw=True)

            self.render(board)
            board = self.take_turn(board, self.current_player)
            self._transition(TurnState.BOARD_UPDATED)
            self.render(board)

            self._transition(TurnState.WIN_CHECK)
            outcome = check_for_winner(board)
            if outcome.is_win:
                self._transition(TurnState.MATCH_OVER)
                winner = outcome.winner
                loser = player2 if winner == player1 else player1
                debug.info(f"{winner} wins against {loser} after {turn + 1} moves", "match")
                return MatchResult(winner, loser)

            turn += 1
            self._transition(TurnState.AWAITING_MOVE)


class MatchSession:
    """
    A run of matches between the same two players.

    After each match the players are asked whether to play again. The winner
    of a match moves first in the next one.
    """

    def __init__(self, prompt: PromptFn, render: RenderFn,
                 player1: Any = DEFAULT_PLAYERS[0],
                 player2: Any = DEFAULT_PLAYERS[1],
                 yes: Sequence[str] = YES_ANSWERS,
                 no: Sequence[str] = NO_ANSWERS):
        if player1 == player2:
            raise ValueError(f"players need distinct marks, both are {player1!r}")
        if not yes or not no:
            raise ValueError("yes and no answers must each contain at least one word")

        self.prompt = prompt
        self.render = render
        self.player1 = player1
        self.player2 = player2
        self.yes = [answer.lower() for answer in yes]
        self.no = [answer.lower() for answer in no]
        self.controller = TurnController(prompt, render)
        self.results: List[MatchResult] = []

    def end_game(self, result: MatchResult) -> bool:
        """
        Announce the result and ask for a rematch.

        Returns:
            True if the players answered with one of the yes words
        """
        if result.draw:
            info = "It's a draw! Play again?"
        else:
            info = f"{result.winner} wins! Play again?"
        retry_text = f"Invalid input. Enter '{self.yes[0]}' or '{self.no[0]}'"
        again = self.prompt(info, retry_text, self.yes + self.no)
        return again.lower() in self.yes

    def start(self) -> List[MatchResult]:
        """
        Play matches until the players decline a rematch.

        Returns:
            Results of every match played in this session
        """
        self.results = []
        first, second = self.player1, self.player2
        while True:
            result = self.controller.play(first, second)
            self.results.append(result)

            if not self.end_game(result):
                debug.info(f"Session over after {len(self.results)} match(es)", "session")
                return self.results

            first, second = result.winner, result.loser
            debug.debug(f"Rematch {len(self.results) + 1}: {first} moves first", "session")
