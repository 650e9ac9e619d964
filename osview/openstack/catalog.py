"""Service catalog types and parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from ..exceptions import DecodeError


class Category(Enum):
    """Service category of a catalog endpoint."""
    IDENTITY = "identity"
    COMPUTE = "compute"
    IMAGE = "image"
    NETWORK = "network"
    VOLUME = "volume"
    UNKNOWN = "unknown"

    @classmethod
    def from_type(cls, service_type: str) -> Category:
        """Map a catalog service-type string to a Category."""
        service_type = service_type.strip().lower()
        if service_type in _VOLUME_TYPES:
            return cls.VOLUME
        try:
            return cls(service_type)
        except ValueError:
            return cls.UNKNOWN


_VOLUME_TYPES = frozenset({"volume", "volumev2", "volumev3", "block-storage"})


@dataclass(frozen=True)
class Endpoint:
    url: str
    category: Category
    interface: str = ""


def parse_catalog(catalog: Any) -> list[Endpoint]:
    """Flatten a Keystone v3 catalog into one Endpoint per (service, url) pair.

    Raises:
        DecodeError: If the catalog does not have the expected shape.
    """
    if not isinstance(catalog, list):
        raise DecodeError("Service catalog is not a list")

    endpoints = []
    for entry in catalog:
        try:
            category = Category.from_type(entry["type"])
            for ep in entry["endpoints"]:
                endpoints.append(Endpoint(
                    url=ep["url"],
                    category=category,
                    interface=ep.get("interface", ""),
                ))
        except (KeyError, TypeError, AttributeError) as e:
            raise DecodeError(f"Malformed service catalog entry: {e}") from e
    return endpoints


def find_endpoint(
    endpoints: Iterable[Endpoint],
    category: Category,
    interface: str = "public",
) -> Optional[str]:
    """Return the URL for a category, preferring the given interface.

    Falls back to the first endpoint of the category when none matches the
    interface (mock servers often omit it).
    """
    matching = [ep for ep in endpoints if ep.category == category]
    for ep in matching:
        if ep.interface == interface:
            return ep.url
    return matching[0].url if matching else None
