import httpx
from typing import Dict, Any, Optional, List, TypeVar, Callable, Awaitable, cast
import functools
import logging

from hass_bridge.config import HA_URL, HA_TOKEN, HA_TIMEOUT, HA_VERIFY_SSL, get_ha_headers
from hass_bridge.errors import ErrorCode, ToolError

# Set up logging
logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Awaitable[Any]])

# HTTP client
_client: Optional[httpx.AsyncClient] = None

def handle_api_errors(func: F) -> F:
    """
    Decorator to translate failures of Home Assistant API calls into ToolError

    Args:
        func: The async function to decorate

    Returns:
        Wrapped function that raises ToolError for every failure
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        # Check if token is available
        if not HA_TOKEN:
            raise ToolError(
                ErrorCode.INTERNAL_ERROR,
                "No Home Assistant token provided. Please set the HA_TOKEN environment variable."
            )

        try:
            return await func(*args, **kwargs)
        except ToolError:
            raise
        except httpx.ConnectError as e:
            raise ToolError(ErrorCode.INTERNAL_ERROR, f"Connection error: Cannot connect to Home Assistant at {HA_URL}") from e
        except httpx.TimeoutException as e:
            raise ToolError(ErrorCode.INTERNAL_ERROR, f"Timeout error: Home Assistant at {HA_URL} did not respond in time") from e
        except httpx.RequestError as e:
            raise ToolError(ErrorCode.INTERNAL_ERROR, f"Error connecting to Home Assistant: {str(e)}") from e
        except ValueError as e:
            # json.JSONDecodeError is a ValueError
            raise ToolError(ErrorCode.INTERNAL_ERROR, f"Invalid JSON from Home Assistant: {str(e)}") from e
        except Exception as e:
            logger.exception(f"Unexpected error in {func.__name__}")
            raise ToolError(ErrorCode.INTERNAL_ERROR, f"Unexpected error: {str(e)}") from e

    return cast(F, wrapper)

# Persistent HTTP client
async def get_client() -> httpx.AsyncClient:
    """Get a persistent httpx client for Home Assistant API calls"""
    global _client
    if _client is None:
        logger.debug("Creating new HTTP client")
        _client = httpx.AsyncClient(timeout=HA_TIMEOUT, verify=HA_VERIFY_SSL)
    return _client

async def cleanup_client() -> None:
    """Close the HTTP client when shutting down"""
    global _client
    if _client:
        logger.debug("Closing HTTP client")
        await _client.aclose()
        _client = None

def check_status(response: httpx.Response) -> None:
    """Reject every response that is not a plain 200 OK"""
    if response.status_code != httpx.codes.OK:
        raise ToolError(ErrorCode.HOME_ASSISTANT_API_ERROR, f"Status code: {response.status_code}")

# API Functions
@handle_api_errors
async def get_entity_state(entity_id: str) -> Dict[str, Any]:
    """
    Get the state of a Home Assistant entity

    Args:
        entity_id: The entity ID to get

    Returns:
        The decoded state object as returned by Home Assistant
    """
    client = await get_client()
    response = await client.get(
        f"{HA_URL}/api/states/{entity_id}",
        headers=get_ha_headers()
    )
    check_status(response)
    return response.json()

@handle_api_errors
async def get_entities() -> List[Dict[str, Any]]:
    """Get the state objects of every entity known to Home Assistant"""
    client = await get_client()
    response = await client.get(f"{HA_URL}/api/states", headers=get_ha_headers())
    check_status(response)
    entities = response.json()

    if not isinstance(entities, list):
        raise ToolError(
            ErrorCode.INTERNAL_ERROR,
            f"Unexpected response from Home Assistant: expected a list of states, got {type(entities).__name__}"
        )
    for entity in entities:
        if not isinstance(entity, dict):
            raise ToolError(
                ErrorCode.INTERNAL_ERROR,
                f"Unexpected response from Home Assistant: expected state objects, got {type(entity).__name__}"
            )
    return entities

@handle_api_errors
async def call_service(domain: str, service: str, data: Optional[Dict[str, Any]] = None) -> None:
    """Call a Home Assistant service. The response body is not inspected."""
    if data is None:
        data = {}

    client = await get_client()
    response = await client.post(
        f"{HA_URL}/api/services/{domain}/{service}",
        headers=get_ha_headers(),
        json=data
    )
    check_status(response)
