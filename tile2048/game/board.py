#!/usr/bin/env python3
"""
Game board logic for tile2048.
Defines all board operations and game mechanics.
"""

import enum
import random

from ..utils import config

GRID_SIZE = config.GRID_SIZE


class Direction(enum.Enum):
    """The four directions tiles can be slid in."""
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


# Tile value -> color token, anything else falls back to DEFAULT_COLOR
TILE_COLORS = {
    0: "dark_grey",
    2: "white",
    4: "cyan",
    8: "blue",
    16: "green",
    32: "yellow",
    64: "magenta",
    128: "red",
    256: "dark_red",
    512: "dark_yellow",
    1024: "dark_green",
    2048: "dark_magenta",
}
DEFAULT_COLOR = "white"


def new_board():
    """Create an empty board."""
    return [[0 for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]


def new_game():
    """Initialize a new 2048 game board."""
    board = new_board()
    for _ in range(config.INITIAL_TILES):
        add_random_tile(board)
    return board


def add_random_tile(board):
    """
    Add a random tile (2 or 4) to an empty cell on the board.
    Returns the (row, col) that was filled, or None when the board is full.
    """
    empty = [(i, j) for i in range(GRID_SIZE) for j in range(GRID_SIZE) if board[i][j] == 0]
    if not empty:
        return None
    i, j = random.choice(empty)
    if random.randrange(config.SPAWN_DRAW_RANGE) < config.SPAWN_FOUR_THRESHOLD:
        board[i][j] = config.SPAWN_LOW_VALUE
    else:
        board[i][j] = config.SPAWN_HIGH_VALUE
    return i, j


def compress_row(row):
    """Slide all nonzero numbers in a row to the left, keeping their order."""
    changed = False
    write = 0
    for read, value in enumerate(row):
        if value == 0:
            continue
        if read != write:
            row[write] = value
            row[read] = 0
            changed = True
        write += 1
    return changed


def merge_row(row):
    """Merge adjacent tiles with the same value (left-to-right, one pass)."""
    changed = False
    for j in range(len(row) - 1):
        if row[j] != 0 and row[j] == row[j + 1]:
            row[j] *= 2
            row[j + 1] = 0
            changed = True
    return changed


def compress(board):
    """Slide all nonzero numbers to the left."""
    changed = False
    for row in board:
        changed = compress_row(row) or changed
    return changed


def merge(board):
    """Merge adjacent equal tiles in every row."""
    changed = False
    for row in board:
        changed = merge_row(row) or changed
    return changed


def reverse(board):
    """Reverse each row of the board in place."""
    for row in board:
        row.reverse()


def transpose(board):
    """Transpose the board in place (swap rows and columns)."""
    for i in range(GRID_SIZE):
        for j in range(i + 1, GRID_SIZE):
            board[i][j], board[j][i] = board[j][i], board[i][j]


def collapse_left(board):
    """Base movement (left): compress, merge, compress again."""
    compress(board)
    merge(board)
    compress(board)


def collapse(board, direction):
    """
    Slide and merge every tile toward the edge given by direction.
    The board is mutated in place; no tile is spawned.
    Returns whether any cell changed.
    """
    before = [row[:] for row in board]

    if direction is Direction.LEFT:
        collapse_left(board)
    elif direction is Direction.RIGHT:
        reverse(board)
        collapse_left(board)
        reverse(board)
    elif direction is Direction.UP:
        transpose(board)
        collapse_left(board)
        transpose(board)
    elif direction is Direction.DOWN:
        transpose(board)
        reverse(board)
        collapse_left(board)
        reverse(board)
        transpose(board)

    return board != before


def move(board, direction):
    """
    Play one turn: collapse in the given direction, then spawn a tile
    if the board changed. Returns whether the move was accepted.

    A full board that cannot collapse simply stays as it is.
    """
    changed = collapse(board, direction)
    if changed:
        add_random_tile(board)
    return changed


def color_for(value):
    """Color token used to draw a tile of the given value."""
    return TILE_COLORS.get(value, DEFAULT_COLOR)
