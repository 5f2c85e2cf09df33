"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, win detection,
and the match / session state machines.
"""

from connectfour.game.board import Board, OutOfRangeError
from connectfour.game.rules import check_for_winner, check_cell_for_winner
from connectfour.game.match import MatchResult, MatchSession, TurnController, TurnState

__all__ = ['Board', 'OutOfRangeError', 'check_for_winner', 'check_cell_for_winner',
           'MatchResult', 'MatchSession', 'TurnController', 'TurnState']
