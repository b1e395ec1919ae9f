"""Home Assistant stdio bridge.

This package provides a small line-delimited JSON server that lets an LLM client
read and control a Home Assistant instance through a fixed set of tools.
"""

__version__ = "0.1.0"

from hass_bridge.server import serve, main

__all__ = ["serve", "main"]
