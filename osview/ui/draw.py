"""curses drawing helpers shared by the form and the server list."""

import curses


# ---------------------------------------------------------------------------
# Color pairs
# ---------------------------------------------------------------------------

class Colors:
    DEFAULT = 0
    HEADER = 1
    BORDER = 2
    HIGHLIGHT = 3
    FAILURE = 4
    SUCCESS = 5
    WARNING = 6
    DIM = 7


def init_colors():
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(Colors.HEADER, curses.COLOR_CYAN, -1)
    curses.init_pair(Colors.BORDER, curses.COLOR_BLUE, -1)
    curses.init_pair(Colors.HIGHLIGHT, curses.COLOR_WHITE, curses.COLOR_BLUE)
    curses.init_pair(Colors.FAILURE, curses.COLOR_RED, -1)
    curses.init_pair(Colors.SUCCESS, curses.COLOR_GREEN, -1)
    curses.init_pair(Colors.WARNING, curses.COLOR_YELLOW, -1)
    curses.init_pair(Colors.DIM, curses.COLOR_WHITE, -1)


# ---------------------------------------------------------------------------
# Safe drawing helpers
# ---------------------------------------------------------------------------

def safe_addstr(win, y: int, x: int, text: str, attr: int = 0, max_x: int = 0):
    """Write text to window, clipping to max_x if provided."""
    try:
        max_y_win, max_x_win = win.getmaxyx()
        if y < 0 or y >= max_y_win or x < 0 or x >= max_x_win:
            return
        limit = (max_x if max_x > 0 else max_x_win) - x
        if limit <= 0:
            return
        win.addnstr(y, x, text, limit, attr)
    except curses.error:
        pass


def safe_hline(win, y: int, x: int, ch, width: int, attr: int = 0):
    try:
        if attr:
            win.attron(attr)
        win.hline(y, x, ch, width)
        if attr:
            win.attroff(attr)
    except curses.error:
        pass


def safe_vline(win, y: int, x: int, ch, height: int, attr: int = 0):
    try:
        if attr:
            win.attron(attr)
        win.vline(y, x, ch, height)
        if attr:
            win.attroff(attr)
    except curses.error:
        pass


def draw_box(win, y: int, x: int, height: int, width: int, attr: int = 0):
    """Draw a single-line border with its top-left corner at (y, x)."""
    if height < 2 or width < 2:
        return
    right = x + width - 1
    bottom = y + height - 1
    safe_hline(win, y, x + 1, curses.ACS_HLINE, width - 2, attr)
    safe_hline(win, bottom, x + 1, curses.ACS_HLINE, width - 2, attr)
    safe_vline(win, y + 1, x, curses.ACS_VLINE, height - 2, attr)
    safe_vline(win, y + 1, right, curses.ACS_VLINE, height - 2, attr)
    for cy, cx, ch in (
        (y, x, curses.ACS_ULCORNER),
        (y, right, curses.ACS_URCORNER),
        (bottom, x, curses.ACS_LLCORNER),
        (bottom, right, curses.ACS_LRCORNER),
    ):
        try:
            win.addch(cy, cx, ch, attr)
        except curses.error:
            pass
