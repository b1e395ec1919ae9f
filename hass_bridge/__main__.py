#!/usr/bin/env python
"""Entry point for running the bridge as a module"""

from hass_bridge.server import main


if __name__ == "__main__":
    main()
