import pytest
import httpx
from unittest.mock import AsyncMock

from jira_connector.core.http_client import JiraHttpClient
from jira_connector.core.models import ClientConfig


# --- Fixtures de configuration et de transport factice ---

@pytest.fixture
def config() -> ClientConfig:
    """Configuration de test (host avec slash final, comme dans Jira Cloud)."""
    return ClientConfig(
        host_url="https://example.atlassian.net/",
        username="test@example.com",
        api_token="test-api-token",
        timeout=10.0,
        max_retries=3,
    )


@pytest.fixture
def fake_transport() -> AsyncMock:
    """Transport dont 'send' est un AsyncMock ; répond 200 {} par défaut."""
    transport = AsyncMock()
    transport.send = AsyncMock(return_value=httpx.Response(200, json={}))
    return transport


@pytest.fixture
def client(config, fake_transport) -> JiraHttpClient:
    return JiraHttpClient(config, transport=fake_transport)
