"""Shared state between the server fetch thread and the live-view loop.

The fetch thread writes, the render path reads. Every read and write takes
the lock for the whole state, so a reader never sees a status from one fetch
paired with records from another half-applied fetch. Rendering works from
an immutable ``ViewSnapshot``.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Iterable, Optional

from .openstack.compute import Server
from .state import FetchStatus


@dataclass(frozen=True)
class ViewSnapshot:
    """Point-in-time copy of the view state used for rendering."""
    status: FetchStatus
    servers: tuple[Server, ...]
    selected: Optional[int]


class ServerListState:
    """Lock-guarded server list, fetch status and selection cursor."""

    def __init__(self):
        self._lock = threading.Lock()
        self._status = FetchStatus.idle()
        self._servers: list[Server] = []
        self._selected: Optional[int] = None

    def snapshot(self) -> ViewSnapshot:
        with self._lock:
            return ViewSnapshot(
                status=self._status,
                servers=tuple(self._servers),
                selected=self._selected,
            )

    def set_status(self, status: FetchStatus) -> None:
        with self._lock:
            self._status = status

    def on_load(self, servers: Iterable[Server]) -> None:
        """Append fetched servers and mark the fetch loaded.

        Selects the first row when the list goes from empty to non-empty.
        """
        with self._lock:
            was_empty = not self._servers
            self._servers.extend(servers)
            self._status = FetchStatus.loaded()
            if was_empty and self._servers:
                self._selected = 0

    def on_error(self, message: str) -> None:
        """Record a failed fetch; the existing servers are kept."""
        self.set_status(FetchStatus.error(message))

    def move_selection(self, delta: int) -> None:
        """Move the cursor by ``delta`` rows, clamped to the list."""
        with self._lock:
            if not self._servers:
                return
            current = self._selected if self._selected is not None else 0
            self._selected = max(0, min(len(self._servers) - 1, current + delta))
