"""Application state machine.

Loading (credential form) -> Authenticate -> LiveView -> Quit. Failed
authentication returns to the form with the error; Esc on either screen
quits the program.
"""

from __future__ import annotations

import curses
import logging
import threading
from typing import Callable, Optional

from .config import Settings
from .credentials import Credentials, load_credentials, save_credentials
from .exceptions import OpenStackError
from .fetcher import ServerFetcher
from .openstack.catalog import Category, Endpoint, find_endpoint
from .openstack.compute import list_servers
from .openstack.identity import TokenResponse, issue_token
from .state import AppState, Authenticate, LiveView, Loading, Quit
from .ui.draw import Colors, safe_addstr
from .ui.form import CredentialForm
from .ui.server_list import FRAMES_PER_SECOND, ServerListView
from .view_state import ServerListState

logger = logging.getLogger(__name__)

SPINNER_FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"


class App:
    def __init__(
        self,
        stdscr,
        settings: Optional[Settings] = None,
        credentials: Optional[Credentials] = None,
        issue: Callable[[Credentials], TokenResponse] = issue_token,
        fetch: Callable = list_servers,
        save: Callable[[Credentials], object] = save_credentials,
    ):
        self.stdscr = stdscr
        self.settings = settings or Settings()
        self._issue = issue
        self._fetch = fetch

        if credentials is None:
            credentials = load_credentials()
        self.form = CredentialForm(credentials, save=save)

        self.token: Optional[str] = None
        self.endpoints: list[Endpoint] = []
        self.state: AppState = Loading()
        if credentials.is_valid():
            self.state = Authenticate(credentials)

    @property
    def compute_url(self) -> Optional[str]:
        """Explicit override first, then the catalog's compute endpoint."""
        if self.settings.compute_url:
            return self.settings.compute_url
        return find_endpoint(self.endpoints, Category.COMPUTE)

    def is_running(self) -> bool:
        return not isinstance(self.state, Quit)

    def run(self):
        """Drive the state machine until Quit."""
        while self.is_running():
            state = self.state
            if isinstance(state, Loading):
                self.form.render(self.stdscr)
                self.stdscr.timeout(-1)
                self.state = self.form.handle_input(self.stdscr.get_wch())
            elif isinstance(state, Authenticate):
                self.state = self._authenticate(state.credentials)
            elif isinstance(state, LiveView):
                self.state = self._live_view()
            else:
                raise TypeError(f"Unknown application state: {state!r}")
            if self.state != state:
                logger.info("State %s -> %s", type(state).__name__,
                            type(self.state).__name__)

    def _authenticate(self, credentials: Credentials) -> AppState:
        """Issue a token on a worker thread, redrawing until it returns."""
        outcome: dict[str, object] = {}

        def worker():
            try:
                outcome["response"] = self._issue(credentials)
            except OpenStackError as e:
                outcome["error"] = e
            except Exception as e:
                logger.exception("Token request crashed")
                outcome["error"] = e

        thread = threading.Thread(target=worker, name="issue-token", daemon=True)
        thread.start()
        frame = 0
        while thread.is_alive():
            self._render_authenticating(credentials, frame)
            frame += 1
            thread.join(timeout=1.0 / FRAMES_PER_SECOND)

        error = outcome.get("error")
        if error is not None:
            logger.warning("Token request failed: %s", error)
            self.form.message = f"Error issuing token: {error}"
            return Loading()

        response = outcome["response"]
        self.token = response.token
        self.endpoints = response.endpoints
        return LiveView()

    def _render_authenticating(self, credentials: Credentials, frame: int):
        win = self.stdscr
        win.erase()
        spinner = SPINNER_FRAMES[frame % len(SPINNER_FRAMES)]
        safe_addstr(win, 0, 0, f"{spinner} Authenticating with {credentials.identity_url}",
                    curses.color_pair(Colors.HEADER) | curses.A_BOLD)
        win.refresh()

    def _live_view(self) -> AppState:
        view_state = ServerListState()
        compute_url = self.compute_url
        logger.info("Listing servers from %s", compute_url or "<none>")
        fetcher = ServerFetcher(view_state, compute_url, self.token, client=self._fetch)
        return ServerListView(self.stdscr, view_state, fetcher).run()
