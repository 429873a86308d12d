"""Service Discovery Module

Registry-backed endpoint resolution with a naming-convention fallback.
"""

from .registry_client import (
    AsyncRegistryLookupClient,
    RegistryLookupClient,
    get_registry_client,
    reset_registry_client,
)
from .results import LookupResult, LookupStatus, fallback_endpoint

__all__ = [
    "RegistryLookupClient",
    "AsyncRegistryLookupClient",
    "get_registry_client",
    "reset_registry_client",
    "LookupResult",
    "LookupStatus",
    "fallback_endpoint",
]
