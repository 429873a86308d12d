"""Lookup outcomes returned by the registry clients."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from uddi_discovery.config import DEFAULT_FALLBACK_PORT


class LookupStatus(str, Enum):
    """How a registry lookup ended."""

    FOUND = "found"  # registry answered 200
    REJECTED = "rejected"  # registry answered with any other status
    UNREACHABLE = "unreachable"  # no response (network, timeout, bad URL)


def fallback_endpoint(service_id: str, port: int = DEFAULT_FALLBACK_PORT) -> str:
    """Conventional endpoint for a service: ``http://{service_id}:{port}``."""
    return f"http://{service_id}:{port}"


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a single registry lookup.

    ``endpoint`` is always populated. The registry body is never parsed, so
    every status carries the fallback endpoint and callers of
    ``resolve_endpoint`` always get a usable URL. ``status`` and ``error``
    record what actually happened.
    """

    service_id: str
    status: LookupStatus
    endpoint: str
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is LookupStatus.FOUND
