"""UDDI Registry Lookup Clients

Resolve a logical service id to a network endpoint by asking the registry,
falling back to the ``http://{service_id}:3000`` naming convention:
- RegistryLookupClient: blocking client sharing one httpx.Client
- AsyncRegistryLookupClient: asyncio counterpart sharing one httpx.AsyncClient

Lookups never raise. Registry failures are turned into LookupResult values
and logged, and ``resolve_endpoint`` always returns the fallback endpoint.
"""

import logging
import threading
from typing import Optional

import httpx

from uddi_discovery.config import RegistryConfig
from uddi_discovery.discovery.results import (
    LookupResult,
    LookupStatus,
    fallback_endpoint,
)

logger = logging.getLogger(__name__)

DEFAULT_INTERFACE_TYPE = "REST"


class _RegistryLookupBase:
    """Request building and outcome mapping shared by both clients."""

    def __init__(self, config: Optional[RegistryConfig] = None):
        self.config = config or RegistryConfig.from_env()
        self.registry_url = self.config.registry_url

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.config.request_timeout, connect=self.config.connect_timeout)

    def _service_url(self, service_id: str) -> str:
        return f"{self.registry_url}/api/services/{service_id}"

    def _health_url(self) -> str:
        return f"{self.registry_url}/health"

    def _endpoint(self, service_id: str) -> str:
        return fallback_endpoint(service_id, self.config.fallback_port)

    def _from_response(self, service_id: str, response: httpx.Response) -> LookupResult:
        # The body is intentionally ignored; a 200 still maps to the convention.
        if response.status_code == 200:
            result = LookupResult(
                service_id=service_id,
                status=LookupStatus.FOUND,
                endpoint=self._endpoint(service_id),
                status_code=200,
            )
            logger.debug(f"Resolved {service_id} -> {result.endpoint}")
            return result

        reason = f"registry responded {response.status_code}"
        logger.warning(f"Error getting service endpoint for {service_id}: {reason}")
        return LookupResult(
            service_id=service_id,
            status=LookupStatus.REJECTED,
            endpoint=self._endpoint(service_id),
            status_code=response.status_code,
            error=reason,
        )

    def _from_exception(self, service_id: str, exc: Exception) -> LookupResult:
        reason = str(exc) or exc.__class__.__name__
        logger.error(f"Error getting service endpoint for {service_id}: {reason}")
        return LookupResult(
            service_id=service_id,
            status=LookupStatus.UNREACHABLE,
            endpoint=self._endpoint(service_id),
            error=reason,
        )


class RegistryLookupClient(_RegistryLookupBase):
    """Blocking registry client.

    One httpx.Client is created per instance and reused across calls, so a
    single instance can be shared between threads. Each call blocks for at
    most the configured connect and request timeouts (10s each by default).

    Example:
        ```python
        client = RegistryLookupClient(RegistryConfig.from_env())
        client.resolve_endpoint("orders-service", "REST")
        # 'http://orders-service:3000'
        ```
    """

    def __init__(
        self,
        config: Optional[RegistryConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """Initialize the lookup client.

        Args:
            config: Registry configuration (default: RegistryConfig.from_env())
            http_client: Pre-built httpx.Client; left open on close()
        """
        super().__init__(config)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=self._timeout())

        logger.info(f"Initialized {self.__class__.__name__} with registry_url={self.registry_url}")

    def lookup(self, service_id: str, interface_type: str = DEFAULT_INTERFACE_TYPE) -> LookupResult:
        """Query the registry for a service.

        Args:
            service_id: Logical service id (e.g., "orders-service")
            interface_type: Accepted for future filtering; currently unused

        Returns:
            LookupResult describing the outcome, never raises
        """
        logger.debug(f"Looking up {service_id} (interface_type={interface_type})")
        try:
            response = self._client.get(self._service_url(service_id), timeout=self._timeout())
        except Exception as e:
            return self._from_exception(service_id, e)
        return self._from_response(service_id, response)

    def resolve_endpoint(self, service_id: str, interface_type: str = DEFAULT_INTERFACE_TYPE) -> str:
        """Resolve a service id to an endpoint URL.

        Always succeeds: whatever the registry does, the conventional
        ``http://{service_id}:3000`` endpoint is returned.
        """
        return self.lookup(service_id, interface_type).endpoint

    def check_health(self) -> bool:
        """Return True if the registry answers its health endpoint with 200."""
        try:
            response = self._client.get(self._health_url(), timeout=self._timeout())
        except Exception as e:
            logger.warning(f"Registry health check failed for {self.registry_url}: {e}")
            return False

        healthy = response.status_code == 200
        if not healthy:
            logger.warning(
                f"Registry health check failed for {self.registry_url}: "
                f"status {response.status_code}"
            )
        return healthy

    def close(self) -> None:
        """Close the underlying connection pool if this client created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "RegistryLookupClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncRegistryLookupClient(_RegistryLookupBase):
    """Async registry client with the same contract as RegistryLookupClient.

    Usage:
        async with AsyncRegistryLookupClient() as client:
            endpoint = await client.resolve_endpoint("catalog-service")
    """

    def __init__(
        self,
        config: Optional[RegistryConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(config)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self._timeout())

        logger.info(f"Initialized {self.__class__.__name__} with registry_url={self.registry_url}")

    async def lookup(self, service_id: str, interface_type: str = DEFAULT_INTERFACE_TYPE) -> LookupResult:
        logger.debug(f"Looking up {service_id} (interface_type={interface_type})")
        try:
            response = await self._client.get(self._service_url(service_id), timeout=self._timeout())
        except Exception as e:
            return self._from_exception(service_id, e)
        return self._from_response(service_id, response)

    async def resolve_endpoint(self, service_id: str, interface_type: str = DEFAULT_INTERFACE_TYPE) -> str:
        result = await self.lookup(service_id, interface_type)
        return result.endpoint

    async def check_health(self) -> bool:
        try:
            response = await self._client.get(self._health_url(), timeout=self._timeout())
        except Exception as e:
            logger.warning(f"Registry health check failed for {self.registry_url}: {e}")
            return False

        healthy = response.status_code == 200
        if not healthy:
            logger.warning(
                f"Registry health check failed for {self.registry_url}: "
                f"status {response.status_code}"
            )
        return healthy

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncRegistryLookupClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


# Singleton instance for global access
_client_instance: Optional[RegistryLookupClient] = None
_client_lock = threading.Lock()


def get_registry_client() -> RegistryLookupClient:
    """Get or create the global RegistryLookupClient.

    The registry address is read from UDDI_REGISTRY_URL on first call only.

    Example:
        ```python
        from uddi_discovery.discovery import get_registry_client

        endpoint = get_registry_client().resolve_endpoint("billing-service")
        ```
    """
    global _client_instance

    if _client_instance is None:
        with _client_lock:
            # Another thread may have built it while we waited
            if _client_instance is None:
                _client_instance = RegistryLookupClient(RegistryConfig.from_env())

    return _client_instance


def reset_registry_client() -> None:
    """Close and drop the global client.

    Used for testing or reconfiguration.
    """
    global _client_instance
    with _client_lock:
        if _client_instance is not None:
            _client_instance.close()
        _client_instance = None
    logger.warning("RegistryLookupClient instance reset")
