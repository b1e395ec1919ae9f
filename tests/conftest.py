import os
import sys
import pytest
from unittest.mock import MagicMock, patch, AsyncMock

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Mock config
@pytest.fixture
def mock_config():
    """Create a mock configuration."""
    return {
        "hass_url": "http://localhost:8123",
        "hass_token": "mock_token",
    }

# Pin the settings the HTTP layer captured at import time
@pytest.fixture(autouse=True)
def mock_hass_settings(mock_config):
    with patch('hass_bridge.hass.HA_URL', mock_config["hass_url"]), \
            patch('hass_bridge.hass.HA_TOKEN', mock_config["hass_token"]), \
            patch('hass_bridge.config.HA_TOKEN', mock_config["hass_token"]):
        yield

@pytest.fixture
def make_response():
    """Return a factory for fake httpx responses."""
    def factory(status_code=200, json_data=None):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = json_data
        return response
    return factory

# Patch hass_bridge.hass.get_client
@pytest.fixture
def mock_client(make_response):
    """Replace the shared HTTP client with a mock returning 200 by default."""
    client = MagicMock()
    client.get = AsyncMock(return_value=make_response())
    client.post = AsyncMock(return_value=make_response())

    with patch('hass_bridge.hass.get_client', AsyncMock(return_value=client)):
        yield client
