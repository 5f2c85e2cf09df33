#!/usr/bin/env python3
"""
run.py - Main entry point for two-player Connect Four
"""

import argparse
import sys

from connectfour.debug import debug, DebugLevel
from connectfour.interfaces.cli import SimpleCLI
from connectfour.utils import DEFAULT_PLAYERS

# --- Utility Functions ---

def configure_debug(args):
    """Configure debug level based on args.debug or args.debug_level."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)
    if args.log_file:
        debug.configure(log_file=args.log_file)

def single_character(value):
    """argparse type for player marks: one visible character."""
    value = value.strip()
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"player mark must be a single character, got {value!r}")
    return value

# --- Main Entry Point ---

def main(argv=None):
    """Main entry point for two-player Connect Four."""
    parser = argparse.ArgumentParser(
        description='Two-player Connect Four in the terminal',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:

    # Play with the default marks (X moves first)
    python run.py

    # Choose your own marks
    python run.py --player1 R --player2 Y

    # Write detailed logs to a file while playing
    python run.py --debug_level debug --log_file connectfour.log
    """
    )
    parser.add_argument('--player1',
        type=single_character,
        default=DEFAULT_PLAYERS[0],
        help='Mark of the player who moves first (default: X)')
    parser.add_argument('--player2',
        type=single_character,
        default=DEFAULT_PLAYERS[1],
        help='Mark of the second player (default: O)')
    parser.add_argument('--debug',
        action='store_true',
        help='Enable debug mode (equivalent to --debug_level debug)')
    parser.add_argument('--debug_level',
        choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
        default='error',
        help='Set debug level: none (silent), error, warning, info, debug, trace (most verbose)')
    parser.add_argument('--log_file',
        type=str,
        help='Also write log messages to this file')

    args = parser.parse_args(argv)
    if args.player1 == args.player2:
        parser.error("--player1 and --player2 must be different marks")

    configure_debug(args)
    try:
        SimpleCLI().play(args.player1, args.player2)
    except EOFError:
        print("\nInput closed. Goodbye!")
        return 0
    except KeyboardInterrupt:
        print("\nInterrupted. Goodbye!")
        return 130
    return 0

if __name__ == "__main__":
    sys.exit(main())
