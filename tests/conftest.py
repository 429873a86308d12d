import httpx
import pytest

from uddi_discovery.config import REGISTRY_URL_ENV, RegistryConfig
from uddi_discovery.discovery import reset_registry_client


@pytest.fixture(autouse=True)
def clean_registry_env(monkeypatch):
    monkeypatch.delenv(REGISTRY_URL_ENV, raising=False)
    yield
    reset_registry_client()


@pytest.fixture
def config():
    return RegistryConfig(registry_url="http://registry.test:3004")


@pytest.fixture
def seen_requests():
    return []


@pytest.fixture
def make_transport(seen_requests):
    """Build a MockTransport that records requests and answers via ``behaviour``.

    ``behaviour`` is either a status code or an exception class; exceptions
    are raised with the request attached, like httpx transports do.
    """

    def _make(behaviour=200, body=b'{"serviceId": "ignored"}'):
        def handler(request: httpx.Request) -> httpx.Response:
            seen_requests.append(request)
            if isinstance(behaviour, type) and issubclass(behaviour, Exception):
                raise behaviour("simulated failure", request=request)
            return httpx.Response(behaviour, content=body, request=request)

        return httpx.MockTransport(handler)

    return _make
