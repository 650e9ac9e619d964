"""Helpers for building fake HTTP responses and curses windows."""

import json
from unittest.mock import MagicMock

from requests import Request, Response

from osview.credentials import Credentials


VALID_CREDENTIALS = Credentials(
    username="demo-user",
    password="s3cret",
    tenant_id="project-123",
    identity_url="http://keystone.example.com:5000",
)


def mock_win(rows=24, cols=100):
    win = MagicMock()
    win.getmaxyx.return_value = (rows, cols)
    return win


def drawn_text(win) -> list[str]:
    """All strings written through addnstr, in call order."""
    return [c.args[2] for c in win.addnstr.call_args_list]


def make_response(status: int, body=None, headers=None,
                  url: str = "http://example.com", raw: bytes | None = None) -> Response:
    response = Response()
    response.status_code = status
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode()
    else:
        response._content = b""
    response.headers["Content-Type"] = "application/json"
    response.headers.update(headers or {})
    response.encoding = "utf-8"
    response.request = Request("GET", url).prepare()
    return response


def mock_session(response: Response) -> MagicMock:
    session = MagicMock()
    session.request.return_value = response
    return session
