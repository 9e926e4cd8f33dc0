#!/usr/bin/env python3
"""
2048 in the terminal

Slide the tiles with the arrow keys or w/a/s/d. Equal tiles merge when they
collide, and a new 2 or 4 appears after every move that changes the board.

Usage:
    python main.py              # Play in the current terminal
"""

import sys
import argparse
sys.path.append('.')  # Add current directory to path

from tile2048.ui.console import run_console_ui
from tile2048.utils import config

def main(argv=None):
    parser = argparse.ArgumentParser(
        description="tile2048 - the 2048 sliding tile puzzle for the terminal",
        epilog="Keys: w/a/s/d or arrows to move, q or Ctrl-C to quit.",
    )
    parser.parse_args(argv)

    # Terminal is restored by the console UI before this returns
    run_console_ui()
    print(config.FAREWELL)
    return 0

if __name__ == "__main__":
    sys.exit(main())
