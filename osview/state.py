"""Application and fetch states.

``AppState`` is one of the four screen states the application moves
through. ``FetchStatus`` tags the progress of a server fetch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .credentials import Credentials


@dataclass(frozen=True)
class Loading:
    """Credential form is shown."""


@dataclass(frozen=True)
class Authenticate:
    """Credentials were submitted; a token must be issued."""
    credentials: Credentials


@dataclass(frozen=True)
class LiveView:
    """Token issued; the server list is shown."""


@dataclass(frozen=True)
class Quit:
    """Terminal state."""


AppState = Union[Loading, Authenticate, LiveView, Quit]


@dataclass(frozen=True)
class FetchStatus:
    """Progress of the background server fetch."""
    kind: str
    message: str = ""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"

    @classmethod
    def idle(cls) -> FetchStatus:
        return cls(cls.IDLE)

    @classmethod
    def loading(cls) -> FetchStatus:
        return cls(cls.LOADING)

    @classmethod
    def loaded(cls) -> FetchStatus:
        return cls(cls.LOADED)

    @classmethod
    def error(cls, message: str) -> FetchStatus:
        return cls(cls.ERROR, message)

    @property
    def is_error(self) -> bool:
        return self.kind == self.ERROR

    def __str__(self) -> str:
        if self.kind == self.ERROR:
            return f"Error({self.message})"
        return self.kind.capitalize()
