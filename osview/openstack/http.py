"""HTTP helpers shared by the identity and compute clients."""

from __future__ import annotations

from typing import Any, Optional

import requests

from ..exceptions import DecodeError, TransportError, UnexpectedStatusError


def request(
    session: Optional[requests.Session],
    method: str,
    url: str,
    expected_status: int,
    **kwargs: Any,
) -> requests.Response:
    """Send a request and check the status code.

    No timeout is applied: a hung server hangs the calling thread only.

    Raises:
        TransportError: If no HTTP response was received.
        UnexpectedStatusError: If the status differs from ``expected_status``.
    """
    # requests.request opens and closes a one-off session
    sender = session if session is not None else requests
    try:
        response = sender.request(method, url, **kwargs)
    except requests.RequestException as e:
        raise TransportError(f"{method} {url} failed: {e}") from e

    if response.status_code != expected_status:
        raise UnexpectedStatusError(response.status_code)
    return response


def parse_json(response: requests.Response) -> Any:
    """Return JSON content or raise DecodeError."""
    if not response.content:
        raise DecodeError("Empty response body", status_code=response.status_code)
    try:
        return response.json()
    except ValueError as e:
        preview = response.text[:200].replace("\n", " ").strip()
        raise DecodeError(
            f"Invalid JSON in response: {preview or '<no text>'}",
            status_code=response.status_code,
        ) from e
