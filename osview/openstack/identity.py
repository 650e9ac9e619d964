"""Keystone v3 token issuance."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import requests

from ..credentials import Credentials
from ..exceptions import DecodeError, MissingTokenError
from .catalog import Endpoint, parse_catalog
from .http import parse_json, request

logger = logging.getLogger(__name__)

TOKEN_HEADER = "X-Subject-Token"


@dataclass
class TokenResponse:
    token: str
    endpoints: list[Endpoint] = field(default_factory=list)


def build_auth_request(credentials: Credentials) -> dict[str, Any]:
    """Build a password-method, project-scoped auth request body."""
    return {
        "auth": {
            "identity": {
                "methods": ["password"],
                "password": {
                    "user": {
                        "id": credentials.username,
                        "password": credentials.password,
                    },
                },
            },
            "scope": {
                "project": {
                    "id": credentials.tenant_id,
                },
            },
        },
    }


def tokens_url(identity_url: str) -> str:
    return f"{identity_url.strip().rstrip('/')}/v3/auth/tokens"


def issue_token(
    credentials: Credentials,
    session: Optional[requests.Session] = None,
) -> TokenResponse:
    """Issue a scoped token and read the service catalog.

    Args:
        credentials: User id, password, project id and identity URL
        session: Optional requests session (a new one is used if omitted)

    Returns:
        TokenResponse with the X-Subject-Token value and the flattened catalog

    Raises:
        TransportError: If the identity service could not be reached
        UnexpectedStatusError: If the response status is not 201
        MissingTokenError: If the X-Subject-Token header is absent
        DecodeError: If the body is not a token document with a catalog
    """
    url = tokens_url(credentials.identity_url)
    logger.info("Requesting token from %s for user %s", url, credentials.username)

    response = request(
        session, "POST", url, expected_status=201,
        json=build_auth_request(credentials),
    )

    token = response.headers.get(TOKEN_HEADER)
    if not token:
        raise MissingTokenError()

    body = parse_json(response)
    try:
        catalog = body["token"]["catalog"]
    except (KeyError, TypeError) as e:
        raise DecodeError(f"Token response has no catalog: {e}", status_code=201) from e

    endpoints = parse_catalog(catalog)
    logger.info("Token issued; catalog has %d endpoints", len(endpoints))
    return TokenResponse(token=token, endpoints=endpoints)
