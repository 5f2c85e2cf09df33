"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the terminal front end: the line prompt the game asks
questions through and the board printer.
"""

# Don't import anything here to avoid circular imports
__all__ = []
