#!/usr/bin/env python3
"""
Console interface for tile2048.
Provides the terminal UI: raw keyboard input, colored board rendering
and the main game loop.
"""

import curses
import sys

from ..utils import config
from ..game import board

QUIT = "quit"          # Returned by decode_key for the quit keys
ESC = 27
CTRL_C = 3             # ETX, delivered as a key in raw mode

DIRECTION_KEYS = {
    ord('w'): board.Direction.UP,
    curses.KEY_UP: board.Direction.UP,
    ord('s'): board.Direction.DOWN,
    curses.KEY_DOWN: board.Direction.DOWN,
    ord('a'): board.Direction.LEFT,
    curses.KEY_LEFT: board.Direction.LEFT,
    ord('d'): board.Direction.RIGHT,
    curses.KEY_RIGHT: board.Direction.RIGHT,
}
QUIT_KEYS = (ord('q'), CTRL_C)

PASTE_START = "[200~"
PASTE_END = "[201~"

# Color token -> (curses color, bright)
TOKEN_COLORS = {
    "dark_grey": (curses.COLOR_BLACK, True),
    "white": (curses.COLOR_WHITE, True),
    "cyan": (curses.COLOR_CYAN, True),
    "blue": (curses.COLOR_BLUE, True),
    "green": (curses.COLOR_GREEN, True),
    "yellow": (curses.COLOR_YELLOW, True),
    "magenta": (curses.COLOR_MAGENTA, True),
    "red": (curses.COLOR_RED, True),
    "dark_red": (curses.COLOR_RED, False),
    "dark_yellow": (curses.COLOR_YELLOW, False),
    "dark_green": (curses.COLOR_GREEN, False),
    "dark_magenta": (curses.COLOR_MAGENTA, False),
}

# Box-drawing frame, sized for CELL_WIDTH == 6
TOP_BORDER = "┏━━━━━━┯━━━━ " + config.TITLE + " ━━━┯━━━━━━┓"
ROW_SEPARATOR = "┠" + "┼".join(["─" * config.CELL_WIDTH] * board.GRID_SIZE) + "┨"
BOTTOM_BORDER = "┗" + "┷".join(["━" * config.CELL_WIDTH] * board.GRID_SIZE) + "┛"
OUTER_EDGE = "┃"
INNER_EDGE = "│"


def init_colors():
    """
    Create one color pair per color token.
    Returns a dict of token -> curses attribute.
    """
    if not curses.has_colors():
        return {token: curses.A_NORMAL for token in TOKEN_COLORS}

    curses.start_color()
    curses.use_default_colors()

    attrs = {}
    for pair, (token, (color, bright)) in enumerate(TOKEN_COLORS.items(), start=1):
        curses.init_pair(pair, color, -1)
        attr = curses.color_pair(pair)
        if bright:
            attr |= curses.A_BOLD
        attrs[token] = attr
    return attrs


def format_cell(value):
    """Centre a tile value in its cell; empty cells are blank."""
    if value == 0:
        return " " * config.CELL_WIDTH
    return f"{value:^{config.CELL_WIDTH}}"


def display_board(stdscr, game_board, colors):
    """Display the game board in the console."""
    # Clear screen
    stdscr.erase()

    stdscr.addstr(0, 0, TOP_BORDER)

    y = 1
    for i, row in enumerate(game_board):
        x = 0
        stdscr.addstr(y, x, OUTER_EDGE)
        x += 1
        for j, cell in enumerate(row):
            attr = colors.get(board.color_for(cell), curses.A_NORMAL)
            stdscr.addstr(y, x, format_cell(cell), attr)
            x += config.CELL_WIDTH
            if j < len(row) - 1:
                stdscr.addstr(y, x, INNER_EDGE)
                x += 1
        stdscr.addstr(y, x, OUTER_EDGE)
        y += 1
        if i < len(game_board) - 1:
            stdscr.addstr(y, 0, ROW_SEPARATOR)
            y += 1

    stdscr.addstr(y, 0, BOTTOM_BORDER)

    # Print instructions
    stdscr.addstr(y + 2, 0, config.QUIT_HINT)

    # Refresh screen
    stdscr.refresh()


def decode_key(key):
    """
    Translate a key code into a board.Direction, QUIT, or None
    for input the game ignores.
    """
    if key in QUIT_KEYS:
        return QUIT
    return DIRECTION_KEYS.get(key)


def read_escape_sequence(stdscr):
    """Read whatever is already buffered after an ESC byte."""
    chars = []
    stdscr.nodelay(True)
    try:
        while True:
            key = stdscr.getch()
            if key == -1:
                break
            chars.append(chr(key))
            # CSI sequences end on a final byte in '@'..'~'
            if len(chars) > 1 and chars[0] == "[" and "@" <= chars[-1] <= "~":
                break
    finally:
        stdscr.nodelay(False)
    return "".join(chars)


def skip_paste(stdscr):
    """
    Discard bracketed-paste content up to the paste end marker.
    Control-C still gets through and is returned; otherwise returns None.
    """
    marker = chr(ESC) + PASTE_END
    tail = ""
    while not tail.endswith(marker):
        key = stdscr.getch()
        if key == CTRL_C:
            return key
        if key < 0:
            continue
        tail = (tail + chr(key))[-len(marker):]
    return None


def read_key(stdscr):
    """
    Block for the next key press.
    Escape sequences (focus changes, pastes, lone ESC) come back as None.
    """
    key = stdscr.getch()
    if key != ESC:
        return key
    if read_escape_sequence(stdscr) == PASTE_START:
        return skip_paste(stdscr)
    return None


def enable_terminal_events():
    """Turn on mouse, focus-change and bracketed-paste reporting."""
    curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
    sys.stdout.write(config.ENABLE_FOCUS_EVENTS + config.ENABLE_BRACKETED_PASTE)
    sys.stdout.flush()


def disable_terminal_events():
    """Turn off everything enable_terminal_events turned on."""
    curses.mousemask(0)
    sys.stdout.write(config.DISABLE_FOCUS_EVENTS + config.DISABLE_BRACKETED_PASTE)
    sys.stdout.flush()


def run_game(stdscr):
    """Run the game loop until the player quits."""
    # Raw mode so Control-C arrives as a key instead of a signal
    curses.raw()
    curses.curs_set(0)
    stdscr.keypad(True)
    colors = init_colors()

    enable_terminal_events()
    try:
        game_board = board.new_game()
        while True:
            display_board(stdscr, game_board, colors)
            key = read_key(stdscr)
            if key is None:
                continue
            intent = decode_key(key)
            if intent == QUIT:
                break
            if intent is not None:
                board.move(game_board, intent)
    except KeyboardInterrupt:
        pass
    finally:
        disable_terminal_events()


def run_console_ui():
    """Run the console UI; the terminal is restored when it returns or raises."""
    curses.wrapper(run_game)
