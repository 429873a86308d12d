"""UDDI Discovery

Service endpoint lookup against a UDDI-style registry for GlobalBooks services.
"""

__version__ = "0.1.0"

from uddi_discovery.config import RegistryConfig

from uddi_discovery.discovery import (
    RegistryLookupClient,
    AsyncRegistryLookupClient,
    LookupResult,
    LookupStatus,
    fallback_endpoint,
    get_registry_client,
    reset_registry_client,
)

__all__ = [
    # Configuration
    "RegistryConfig",
    # Service Discovery
    "RegistryLookupClient",
    "AsyncRegistryLookupClient",
    "LookupResult",
    "LookupStatus",
    "fallback_endpoint",
    "get_registry_client",
    "reset_registry_client",
]
