#!/usr/bin/env python3
"""
Configuration for tile2048.
Centralizes the game constants and terminal settings.
"""

# ---------------- CONFIGURATION PARAMETERS ----------------
# Board parameters
GRID_SIZE = 4                  # Fixed 4x4 board
INITIAL_TILES = 2              # Tiles spawned when a game starts

# Spawn parameters
SPAWN_DRAW_RANGE = 10          # Spawn value is decided by a draw from 0..9
SPAWN_FOUR_THRESHOLD = 9       # Draws at or above this give a 4, below give a 2
SPAWN_LOW_VALUE = 2
SPAWN_HIGH_VALUE = 4

# Display parameters
CELL_WIDTH = 6                 # Characters per cell, values are centred
TITLE = "2048"
QUIT_HINT = "Press 'q' to quit."
FAREWELL = "Thanks for playing!"

# Terminal reporting modes (xterm private modes)
ENABLE_FOCUS_EVENTS = "\x1b[?1004h"
DISABLE_FOCUS_EVENTS = "\x1b[?1004l"
ENABLE_BRACKETED_PASTE = "\x1b[?2004h"
DISABLE_BRACKETED_PASTE = "\x1b[?2004l"
