"""
connectfour - Two-player Connect Four for the terminal

This package provides the board, the win check, the turn loop with its
rematch session, and a small terminal front end.
"""

# Version number
__version__ = '0.1.0'
