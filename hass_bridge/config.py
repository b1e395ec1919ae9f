import logging
import os

logger = logging.getLogger(__name__)

def _float_env(name: str, default: float) -> float:
    """Read a float setting, falling back to ``default`` when it is malformed"""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid {name} value {raw!r}, using {default}")
        return default

# Home Assistant configuration
HA_URL: str = os.environ.get("HA_URL", "http://localhost:8123").rstrip("/")
HA_TOKEN: str = os.environ.get("HA_TOKEN", "")

# HTTP client settings
HA_TIMEOUT: float = _float_env("HA_TIMEOUT", 10.0)
HA_VERIFY_SSL: bool = os.environ.get("HA_VERIFY_SSL", "true").lower() not in ("0", "false", "no")

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

def get_log_level() -> int:
    """Return the numeric logging level for LOG_LEVEL, INFO if it is unknown"""
    level = logging.getLevelName(LOG_LEVEL)
    if isinstance(level, int):
        return level
    logger.warning(f"Unknown LOG_LEVEL {LOG_LEVEL!r}, using INFO")
    return logging.INFO

def get_ha_headers() -> dict:
    """Return the headers needed for Home Assistant API requests"""
    headers = {
        "Content-Type": "application/json",
    }
    
    # Only add Authorization header if token is provided
    if HA_TOKEN:
        headers["Authorization"] = f"Bearer {HA_TOKEN}"
    
    return headers
