"""Nova server listing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..exceptions import DecodeError
from .http import parse_json, request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Server:
    """A compute instance as returned by /servers/detail."""
    id: str
    name: str
    status: str = ""
    task_state: Optional[str] = None
    vm_state: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Server:
        for key in ("id", "name"):
            if not isinstance(data[key], str):
                raise DecodeError(
                    f"Server {key} must be a string, got {type(data[key]).__name__}",
                    status_code=200,
                )
        return cls(
            id=data["id"],
            name=data["name"],
            status=data.get("status", ""),
            task_state=data.get("OS-EXT-STS:task_state"),
            vm_state=data.get("OS-EXT-STS:vm_state"),
        )


def list_servers(
    base_url: str,
    token: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> list[Server]:
    """List servers with details.

    Raises:
        TransportError: If the compute service could not be reached
        UnexpectedStatusError: If the response status is not 200
        DecodeError: If the body is not a server list
    """
    url = f"{base_url.rstrip('/')}/servers/detail"
    headers = {"X-Auth-Token": token} if token else {}
    logger.debug("GET %s", url)

    response = request(session, "GET", url, expected_status=200, headers=headers)
    body = parse_json(response)
    try:
        return [Server.from_json(item) for item in body["servers"]]
    except (KeyError, TypeError, AttributeError) as e:
        raise DecodeError(f"Malformed server list: {e}", status_code=200) from e
