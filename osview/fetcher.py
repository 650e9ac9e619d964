"""Background server fetch.

One fetch runs per entry into the live view. It publishes its progress and
result only through ``ServerListState``; nothing is returned to the caller.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from .exceptions import OpenStackError
from .openstack.compute import Server, list_servers
from .state import FetchStatus
from .view_state import ServerListState

logger = logging.getLogger(__name__)

NO_COMPUTE_ENDPOINT = "No compute endpoint in service catalog"

ListServers = Callable[[str, Optional[str]], list[Server]]


class ServerFetcher:
    def __init__(
        self,
        view_state: ServerListState,
        base_url: Optional[str],
        token: Optional[str] = None,
        client: ListServers = list_servers,
    ):
        self.view_state = view_state
        self.base_url = base_url
        self.token = token
        self.client = client
        self._thread: Optional[threading.Thread] = None

    def start(self) -> threading.Thread:
        """Run fetch_once() on a daemon thread and return immediately."""
        self._thread = threading.Thread(
            target=self.fetch_once, name="server-fetch", daemon=True)
        self._thread.start()
        return self._thread

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def fetch_once(self) -> None:
        """Fetch servers and publish the outcome into the view state."""
        if not self.base_url:
            self.view_state.on_error(NO_COMPUTE_ENDPOINT)
            return

        self.view_state.set_status(FetchStatus.loading())
        try:
            servers = self.client(self.base_url, self.token)
        except OpenStackError as e:
            logger.warning("Server fetch from %s failed: %s", self.base_url, e)
            self.view_state.on_error(str(e))
            return
        except Exception as e:
            logger.exception("Server fetch from %s crashed", self.base_url)
            self.view_state.on_error(str(e) or type(e).__name__)
            return

        logger.info("Fetched %d servers from %s", len(servers), self.base_url)
        self.view_state.on_load(servers)
