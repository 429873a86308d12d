"""Registry client configuration.

The registry address is read once, either explicitly or from the
``UDDI_REGISTRY_URL`` environment variable, and then passed to the client.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

REGISTRY_URL_ENV = "UDDI_REGISTRY_URL"
DEFAULT_REGISTRY_URL = "http://uddi-registry:3004"
DEFAULT_FALLBACK_PORT = 3000


class RegistryConfig(BaseModel):
    """Immutable settings for a registry lookup client.

    Environment Variables:
        UDDI_REGISTRY_URL: Registry base address (default: http://uddi-registry:3004)

    Example:
        ```python
        config = RegistryConfig.from_env()
        client = RegistryLookupClient(config)
        ```
    """

    model_config = ConfigDict(frozen=True)

    registry_url: str = Field(DEFAULT_REGISTRY_URL, min_length=1, description="Registry base address")
    connect_timeout: float = Field(10.0, gt=0, description="Connect timeout in seconds")
    request_timeout: float = Field(10.0, gt=0, description="Request timeout in seconds")
    fallback_port: int = Field(DEFAULT_FALLBACK_PORT, ge=1, le=65535, description="Port used by the fallback endpoint")

    @field_validator("registry_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base address so paths can be appended directly"""
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("registry_url must not be empty")
        return v

    @classmethod
    def from_env(cls, registry_url: Optional[str] = None) -> "RegistryConfig":
        """Build config from the environment.

        Args:
            registry_url: Registry address (overrides UDDI_REGISTRY_URL env var)

        Returns:
            RegistryConfig with the resolved registry address

        An env value that is blank once whitespace and slashes are stripped
        counts as unset. Any other malformed value is kept and fails per call.
        """
        env_url = os.getenv(REGISTRY_URL_ENV, "").strip().rstrip("/")
        if os.getenv(REGISTRY_URL_ENV) and not env_url:
            logger.warning(f"Ignoring blank {REGISTRY_URL_ENV}, using {DEFAULT_REGISTRY_URL}")
        url = registry_url or env_url or DEFAULT_REGISTRY_URL
        logger.debug(f"Registry address resolved to {url}")
        return cls(registry_url=url)
