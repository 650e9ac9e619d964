"""
Minimal OpenStack clients: Keystone token issuance and Nova server listing.
"""

from .catalog import Category, Endpoint, find_endpoint, parse_catalog
from .compute import Server, list_servers
from .identity import TokenResponse, issue_token

__all__ = [
    "Category",
    "Endpoint",
    "Server",
    "TokenResponse",
    "find_endpoint",
    "issue_token",
    "list_servers",
    "parse_catalog",
]
