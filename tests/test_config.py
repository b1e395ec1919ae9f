import logging
import os
import pytest
from importlib import reload
from unittest.mock import patch

from hass_bridge.config import get_ha_headers

class TestConfig:
    """Test the configuration module."""
    
    def test_get_ha_headers_with_token(self):
        """Test getting headers with a token."""
        with patch('hass_bridge.config.HA_TOKEN', 'test_token'):
            headers = get_ha_headers()
            
            assert headers['Content-Type'] == 'application/json'
            assert headers['Authorization'] == 'Bearer test_token'
    
    def test_get_ha_headers_without_token(self):
        """Test getting headers without a token."""
        with patch('hass_bridge.config.HA_TOKEN', ''):
            headers = get_ha_headers()
            
            # Check that only Content-Type is present
            assert headers == {'Content-Type': 'application/json'}
    
    def test_environment_variable_defaults(self):
        """Test that unset environment variables fall back to defaults."""
        import hass_bridge.config

        try:
            with patch.dict(os.environ, {}, clear=True):
                reload(hass_bridge.config)

                assert hass_bridge.config.HA_URL == 'http://localhost:8123'
                assert hass_bridge.config.HA_TOKEN == ''
                assert hass_bridge.config.HA_TIMEOUT == 10.0
                assert hass_bridge.config.HA_VERIFY_SSL is True
                assert hass_bridge.config.LOG_LEVEL == 'INFO'
        finally:
            reload(hass_bridge.config)
    
    def test_environment_variable_custom_values(self):
        """Test that environment variables can be customized."""
        import hass_bridge.config

        env_values = {
            'HA_URL': 'https://homeassistant.local:8123/',
            'HA_TOKEN': 'custom_token',
            'HA_TIMEOUT': '2.5',
            'HA_VERIFY_SSL': 'false',
            'LOG_LEVEL': 'debug',
        }

        try:
            with patch.dict(os.environ, env_values):
                reload(hass_bridge.config)

                # Trailing slash is dropped so paths can be appended directly
                assert hass_bridge.config.HA_URL == 'https://homeassistant.local:8123'
                assert hass_bridge.config.HA_TOKEN == 'custom_token'
                assert hass_bridge.config.HA_TIMEOUT == 2.5
                assert hass_bridge.config.HA_VERIFY_SSL is False
                assert hass_bridge.config.LOG_LEVEL == 'DEBUG'
        finally:
            reload(hass_bridge.config)

    def test_malformed_timeout_falls_back_to_default(self):
        """A non-numeric HA_TIMEOUT does not prevent the module from loading."""
        import hass_bridge.config

        try:
            with patch.dict(os.environ, {'HA_TIMEOUT': 'ten seconds'}):
                reload(hass_bridge.config)

                assert hass_bridge.config.HA_TIMEOUT == 10.0
        finally:
            reload(hass_bridge.config)

    def test_get_log_level(self):
        """Known level names map to logging levels, unknown ones to INFO."""
        from hass_bridge.config import get_log_level

        with patch('hass_bridge.config.LOG_LEVEL', 'DEBUG'):
            assert get_log_level() == logging.DEBUG

        with patch('hass_bridge.config.LOG_LEVEL', 'CHATTY'):
            assert get_log_level() == logging.INFO
