"""Credential entry form."""

from __future__ import annotations

import curses
import logging
from dataclasses import dataclass
from typing import Callable

from ..credentials import Credentials, save_credentials
from ..exceptions import CredentialsError
from ..state import AppState, Authenticate, Loading, Quit
from .draw import Colors, safe_addstr

logger = logging.getLogger(__name__)

KEY_ESC = 27
KEY_TAB = 9
ENTER_KEYS = (ord('\n'), ord('\r'), curses.KEY_ENTER)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)

PASSWORD_MASK = "*"
FILL_ALL_FIELDS = "Please fill in all fields."


@dataclass
class FormField:
    label: str
    value: str = ""
    secret: bool = False

    @property
    def display_value(self) -> str:
        return PASSWORD_MASK * len(self.value) if self.secret else self.value

    @property
    def cursor_offset(self) -> int:
        return len(self.label) + 2 + len(self.value)


class CredentialForm:
    """Four text fields, a focus cursor and a message line.

    Editing is append-only: characters go at the end of the focused field
    and Backspace removes the last one.
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        save: Callable[[Credentials], object] = save_credentials,
    ):
        credentials = credentials or Credentials()
        self.fields = [
            FormField("Username", credentials.username),
            FormField("Password", credentials.password, secret=True),
            FormField("Tenant ID", credentials.tenant_id),
            FormField("Identity URL", credentials.identity_url),
        ]
        self.focus = 0
        self.message = ""
        self._save = save

    @property
    def credentials(self) -> Credentials:
        username, password, tenant_id, identity_url = (f.value for f in self.fields)
        return Credentials(username, password, tenant_id, identity_url)

    def is_valid(self) -> bool:
        return self.credentials.is_valid()

    def handle_input(self, key: int | str) -> AppState:
        """Apply one key press and return the next application state.

        ``key`` is what ``get_wch()`` returns: a one-character string for
        text (control characters included) or an int for function keys.
        """
        if isinstance(key, str):
            if key.isprintable():
                self.fields[self.focus].value += key
                return Loading()
            key = ord(key)

        if key == KEY_ESC:
            return Quit()

        if key == KEY_TAB:
            self.focus = (self.focus + 1) % len(self.fields)
            return Loading()

        if key in ENTER_KEYS:
            return self._submit()

        field = self.fields[self.focus]
        if key in BACKSPACE_KEYS:
            field.value = field.value[:-1]
        elif 32 <= key < 127:
            field.value += chr(key)
        return Loading()

    def _submit(self) -> AppState:
        credentials = self.credentials
        if not credentials.is_valid():
            self.message = FILL_ALL_FIELDS
            return Loading()
        try:
            self._save(credentials)
        except CredentialsError as e:
            logger.warning("Could not save credentials: %s", e)
            self.message = f"Error saving credentials: {e}"
            return Loading()
        self.message = ""
        return Authenticate(credentials)

    def render(self, win):
        """Draw the message line, the fields and place the cursor."""
        win.erase()
        safe_addstr(win, 0, 0, self.message,
                    curses.color_pair(Colors.FAILURE) | curses.A_BOLD)

        for i, field in enumerate(self.fields):
            y = i + 1
            label = f"{field.label}: "
            safe_addstr(win, y, 0, label, curses.A_BOLD)
            safe_addstr(win, y, len(label), field.display_value)

        max_y, _ = win.getmaxyx()
        hint_y = min(len(self.fields) + 2, max_y - 1)
        safe_addstr(win, hint_y, 0, "[Tab] next field  [Enter] submit  [Esc] quit",
                    curses.color_pair(Colors.DIM))

        focused = self.fields[self.focus]
        try:
            win.move(self.focus + 1, focused.cursor_offset)
        except curses.error:
            pass
        win.refresh()
