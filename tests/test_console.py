import curses

import pytest

from tile2048.game import board
from tile2048.game.board import Direction
from tile2048.ui import console


class FakeScreen:
    """Stands in for a curses window: records text and replays keys."""

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.text = {}
        self.attrs = {}
        self.delay = True
        self.refreshed = 0

    def addstr(self, y, x, text, attr=0):
        line = self.text.get(y, "")
        line = line.ljust(x)
        self.text[y] = line[:x] + text + line[x + len(text):]
        self.attrs[(y, x)] = attr

    def erase(self):
        self.text.clear()
        self.attrs.clear()

    def refresh(self):
        self.refreshed += 1

    def nodelay(self, flag):
        self.delay = not flag

    def keypad(self, flag):
        pass

    def getch(self):
        if self.keys:
            return self.keys.pop(0)
        if self.delay:
            raise AssertionError("blocking read with no keys left")
        return -1


def keys_of(text):
    return [ord(c) for c in text]


@pytest.mark.parametrize("key, intent", [
    (ord('w'), Direction.UP),
    (curses.KEY_UP, Direction.UP),
    (ord('s'), Direction.DOWN),
    (curses.KEY_DOWN, Direction.DOWN),
    (ord('a'), Direction.LEFT),
    (curses.KEY_LEFT, Direction.LEFT),
    (ord('d'), Direction.RIGHT),
    (curses.KEY_RIGHT, Direction.RIGHT),
    (ord('q'), console.QUIT),
    (3, console.QUIT),
    (ord('x'), None),
    (ord('W'), None),
    (curses.KEY_MOUSE, None),
    (curses.KEY_RESIZE, None),
])
def test_decode_key(key, intent):
    assert console.decode_key(key) == intent


def test_display_board_draws_frame_and_blank_cells():
    screen = FakeScreen()
    game_board = board.new_board()
    game_board[0][0] = 2
    game_board[3][3] = 2048

    console.display_board(screen, game_board, {})

    assert screen.text[0] == "┏━━━━━━┯━━━━ 2048 ━━━┯━━━━━━┓"
    assert screen.text[1] == "┃  2   │      │      │      ┃"
    assert screen.text[2] == "┠──────┼──────┼──────┼──────┨"
    assert screen.text[7] == "┃      │      │      │ 2048 ┃"
    assert screen.text[8] == "┗━━━━━━┷━━━━━━┷━━━━━━┷━━━━━━┛"
    assert screen.text[10] == "Press 'q' to quit."
    assert "0 " not in screen.text[3]
    assert screen.refreshed == 1


def test_display_board_colors_cells_by_value():
    screen = FakeScreen()
    game_board = board.new_board()
    game_board[1][2] = 4
    colors = {token: index for index, token in enumerate(console.TOKEN_COLORS, start=1)}

    console.display_board(screen, game_board, colors)

    # Row 1 is drawn on line 3; third cell starts after "┃" + 2 cells + 2 "│"
    assert screen.attrs[(3, 15)] == colors["cyan"]
    assert screen.attrs[(3, 1)] == colors["dark_grey"]


def test_format_cell():
    assert console.format_cell(0) == "      "
    assert console.format_cell(16) == "  16  "
    assert console.format_cell(1024) == " 1024 "


def test_read_key_passes_plain_keys_through():
    screen = FakeScreen([ord('a')])
    assert console.read_key(screen) == ord('a')


def test_read_key_ignores_focus_events_and_lone_escape():
    screen = FakeScreen([27] + keys_of("[I") + [27])
    assert console.read_key(screen) is None
    assert screen.delay
    assert console.read_key(screen) is None
    assert screen.delay


def test_read_key_skips_pasted_text():
    pasted = [27] + keys_of("[200~wasd") + [27] + keys_of("[201~q")
    screen = FakeScreen(pasted)
    assert console.read_key(screen) is None
    assert console.read_key(screen) == ord('q')


def test_control_c_during_paste_still_quits():
    screen = FakeScreen([27] + keys_of("[200~ww") + [3] + keys_of("d"))
    key = console.read_key(screen)
    assert key == 3
    assert console.decode_key(key) == console.QUIT
    assert screen.keys == [ord('d')]


def test_direction_keys_map_to_directions():
    assert all(isinstance(value, Direction) for value in console.DIRECTION_KEYS.values())
    assert set(console.DIRECTION_KEYS.values()) == set(Direction)


@pytest.fixture
def quiet_curses(monkeypatch):
    for name in ("raw", "curs_set", "mousemask"):
        monkeypatch.setattr(console.curses, name, lambda *args: None)
    monkeypatch.setattr(console, "init_colors", lambda: {})


def test_run_game_applies_moves_until_quit(monkeypatch, capsys, quiet_curses):
    moves = []
    monkeypatch.setattr(board, "move", lambda game_board, direction: moves.append(direction))

    screen = FakeScreen(keys_of("axd") + [curses.KEY_UP] + keys_of("q"))
    console.run_game(screen)

    assert moves == [Direction.LEFT, Direction.RIGHT, Direction.UP]
    out = capsys.readouterr().out
    assert "\x1b[?1004h" in out and "\x1b[?2004h" in out
    assert out.endswith("\x1b[?1004l\x1b[?2004l")


def test_run_game_quits_on_control_c(quiet_curses):
    screen = FakeScreen([3])
    console.run_game(screen)
    assert screen.refreshed == 1


def test_run_game_restores_terminal_events_on_error(monkeypatch, capsys, quiet_curses):
    def broken_display(stdscr, game_board, colors):
        raise curses.error("terminal too small")

    monkeypatch.setattr(console, "display_board", broken_display)

    with pytest.raises(curses.error):
        console.run_game(FakeScreen())

    assert capsys.readouterr().out.endswith("\x1b[?1004l\x1b[?2004l")
