"""Live server list: render loop, key handling and table drawing."""

from __future__ import annotations

import curses
import logging
import time

from ..fetcher import ServerFetcher
from ..state import AppState, FetchStatus, Quit
from ..view_state import ServerListState, ViewSnapshot
from .draw import Colors, draw_box, safe_addstr

logger = logging.getLogger(__name__)

FRAMES_PER_SECOND = 60.0

KEY_ESC = 27

TITLE = "Servers"
HINT = "j/k to scroll, Esc to quit"
HIGHLIGHT_SYMBOL = ">>"
ID_WIDTH = 36
COLUMN_GAP = 1


def _status_attr(status: FetchStatus) -> int:
    if status.kind == FetchStatus.ERROR:
        return curses.color_pair(Colors.FAILURE) | curses.A_BOLD
    if status.kind == FetchStatus.LOADING:
        return curses.color_pair(Colors.WARNING)
    if status.kind == FetchStatus.LOADED:
        return curses.color_pair(Colors.SUCCESS)
    return curses.color_pair(Colors.DIM)


def _first_visible_row(selected: int | None, visible_rows: int) -> int:
    """Scroll offset that keeps the selected row on screen."""
    if selected is None or visible_rows <= 0:
        return 0
    return max(0, selected - visible_rows + 1)


def render_server_table(win, y: int, x: int, height: int, width: int,
                        snapshot: ViewSnapshot):
    """Draw the bordered server table from a snapshot.

    Reads only the snapshot; drawing the same snapshot twice issues the
    same calls.
    """
    border_attr = curses.color_pair(Colors.BORDER)
    draw_box(win, y, x, height, width, border_attr)
    if height < 3 or width < 4:
        return

    right = x + width - 1
    bottom = y + height - 1

    safe_addstr(win, y, x + 1, TITLE, curses.A_BOLD, max_x=right)
    status_text = str(snapshot.status)
    status_x = max(x + len(TITLE) + 2, right - len(status_text))
    safe_addstr(win, y, status_x, status_text, _status_attr(snapshot.status),
                max_x=right)
    safe_addstr(win, bottom, x + 1, HINT, curses.color_pair(Colors.DIM), max_x=right)

    inner_x = x + 1
    prefix_width = len(HIGHLIGHT_SYMBOL)
    id_x = inner_x + prefix_width
    name_x = id_x + ID_WIDTH + COLUMN_GAP

    rows_top = y + 1
    visible_rows = height - 2
    offset = _first_visible_row(snapshot.selected, visible_rows)

    for row, server in enumerate(snapshot.servers[offset:offset + visible_rows]):
        index = offset + row
        row_y = rows_top + row
        is_selected = index == snapshot.selected
        attr = curses.color_pair(Colors.HIGHLIGHT) if is_selected else 0
        if is_selected:
            safe_addstr(win, row_y, inner_x, " " * (width - 2), attr, max_x=right)
            safe_addstr(win, row_y, inner_x, HIGHLIGHT_SYMBOL, attr | curses.A_BOLD,
                        max_x=right)
        safe_addstr(win, row_y, id_x, server.id[:ID_WIDTH], attr, max_x=right)
        safe_addstr(win, row_y, name_x, server.name, attr, max_x=right)


def render(win, snapshot: ViewSnapshot):
    """Render the whole live view: title line plus server table."""
    win.erase()
    max_y, max_x = win.getmaxyx()

    title_x = max(0, (max_x - len(TITLE)) // 2)
    safe_addstr(win, 0, title_x, TITLE,
                curses.color_pair(Colors.HEADER) | curses.A_BOLD)
    render_server_table(win, 1, 0, max_y - 1, max_x, snapshot)
    win.refresh()


class ServerListView:
    """Owns the terminal while the server list is shown.

    A fixed-rate frame timer and key presses are multiplexed through
    ``getch()`` with a timeout that ends at the next frame deadline. The
    fetch thread started here writes only to ``view_state``.
    """

    def __init__(self, stdscr, view_state: ServerListState, fetcher: ServerFetcher,
                 fps: float = FRAMES_PER_SECOND):
        self.stdscr = stdscr
        self.view_state = view_state
        self.fetcher = fetcher
        self.period = 1.0 / fps
        self.running = True

    def render(self):
        render(self.stdscr, self.view_state.snapshot())

    def handle_input(self, key: int) -> bool:
        """Handle keyboard input. Returns False to quit."""
        if key == KEY_ESC:
            return False
        if key == ord('j') or key == curses.KEY_DOWN:
            self.view_state.move_selection(1)
        elif key == ord('k') or key == curses.KEY_UP:
            self.view_state.move_selection(-1)
        return True

    def run(self) -> AppState:
        """Start the fetch and loop until Esc."""
        self.fetcher.start()
        try:
            curses.curs_set(0)
        except curses.error:
            pass

        next_frame = time.monotonic()
        while self.running:
            now = time.monotonic()
            if now >= next_frame:
                self.render()
                next_frame += self.period
                if next_frame < now:
                    # Fell behind; drop missed frames
                    next_frame = now + self.period

            wait_ms = max(0, int((next_frame - time.monotonic()) * 1000))
            self.stdscr.timeout(wait_ms)
            key = self.stdscr.getch()
            if key != -1:
                self.running = self.handle_input(key)

        logger.info("Leaving live view")
        return Quit()
