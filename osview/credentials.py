"""Credential persistence.

Credentials are stored as a single JSON object in the per-user config
directory. The password is kept in clear text, so the file is written with
owner-only permissions.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .config import get_credentials_path
from .exceptions import CredentialsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """Identity credentials entered on the login form."""
    username: str = ""
    password: str = ""
    tenant_id: str = ""
    identity_url: str = ""

    def is_valid(self) -> bool:
        """All four fields must be non-empty."""
        return all((self.username, self.password, self.tenant_id, self.identity_url))

    def to_json(self) -> dict[str, str]:
        return {
            "username": self.username,
            "password": self.password,
            "tenantid": self.tenant_id,
            "identity_url": self.identity_url,
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Credentials:
        def field(key: str) -> str:
            value = data.get(key, "")
            return value if isinstance(value, str) else ""

        return cls(
            username=field("username"),
            password=field("password"),
            tenant_id=field("tenantid"),
            identity_url=field("identity_url"),
        )


def load_credentials(path: Optional[Path] = None) -> Credentials:
    """Load persisted credentials.

    A missing, unreadable or malformed file is not an error: empty
    credentials are returned and the problem is logged.
    """
    path = path or get_credentials_path()
    if not path.exists():
        return Credentials()
    try:
        data = json.loads(path.read_text())
    except (OSError, ValueError) as e:
        logger.warning("Failed to read credentials from %s: %s", path, e)
        return Credentials()
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", path)
        return Credentials()
    return Credentials.from_json(data)


def save_credentials(credentials: Credentials, path: Optional[Path] = None) -> Path:
    """Write credentials to disk, creating the config directory if needed.

    Raises:
        CredentialsError: If the file cannot be written.
    """
    path = path or get_credentials_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(credentials.to_json(), indent=2))
        path.chmod(0o600)
    except OSError as e:
        raise CredentialsError(f"{path}: {e}") from e
    logger.info("Saved credentials to %s", path)
    return path
