"""Helpers shared by the tool handlers."""
import functools
import json
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Type, TypeVar, cast

from mcp.types import TextContent
from pydantic import BaseModel, ValidationError

from hass_bridge.errors import ErrorCode, ToolError

logger = logging.getLogger(__name__)

T = TypeVar('T')
M = TypeVar('M', bound=BaseModel)

ToolHandler = Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]


def async_handler(command_type: str):
    """
    Simple decorator that logs the command

    Args:
        command_type: The type of command (for logging)
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            logger.info(f"Executing command: {command_type}")
            return await func(*args, **kwargs)
        return cast(Callable[..., Awaitable[T]], wrapper)
    return decorator


def parse_arguments(model: Type[M], tool_name: str, arguments: Optional[Dict[str, Any]]) -> M:
    """Validate raw tool arguments against ``model``.

    Raises:
        ToolError: with ``InvalidParams`` naming the first offending field
    """
    try:
        return model.model_validate(arguments or {})
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "arguments"
        raise ToolError(
            ErrorCode.INVALID_PARAMS,
            f"Invalid arguments for {tool_name}: {field}: {first['msg']}"
        ) from e


def to_pretty_json(data: Any) -> str:
    return json.dumps(data, indent=2)


def text_content(text: str) -> Dict[str, Any]:
    """Wrap ``text`` in the content payload returned by every tool."""
    block = TextContent(type="text", text=text)
    return {"content": [block.model_dump(mode="json", by_alias=True, exclude_none=True)]}
