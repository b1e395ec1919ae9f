import io
import logging
import signal
import sys
from typing import Any, Optional, TextIO

from anyio.from_thread import start_blocking_portal
from pydantic import ValidationError

from hass_bridge.config import HA_URL, HA_TOKEN, get_log_level

# Set up logging. stdout carries protocol responses only.
logging.basicConfig(
    level=get_log_level(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stderr)
    ]
)
logger = logging.getLogger(__name__)

from hass_bridge.errors import ErrorCode, ToolError
from hass_bridge.hass import cleanup_client
from hass_bridge.models import CallToolParams, MCPError, MCPRequest, MCPResponse
from hass_bridge.tools import TOOLS, TOOL_HANDLERS


def error_response(code: ErrorCode, message: str) -> MCPResponse:
    return MCPResponse.failure(MCPError(code=code.value, message=message))

def handle_list_tools() -> MCPResponse:
    """Return the tool catalog"""
    tools = [tool.model_dump(mode="json", by_alias=True, exclude_none=True) for tool in TOOLS]
    return MCPResponse.success({"tools": tools})

async def handle_call_tool(params: Any) -> MCPResponse:
    """
    Invoke one of the registered tools

    Args:
        params: The raw ``params`` of the request, expected to be
                {"name": <tool name>, "arguments": {...}}

    Returns:
        A response carrying the tool's content payload, or an error response
    """
    try:
        call = CallToolParams.model_validate(params)
    except ValidationError:
        return error_response(ErrorCode.INVALID_PARAMS, "Failed to parse call_tool params")

    handler = TOOL_HANDLERS.get(call.name)
    if handler is None:
        return error_response(ErrorCode.METHOD_NOT_FOUND, f"Unknown tool: {call.name}")

    try:
        content = await handler(call.arguments or {})
    except ToolError as e:
        logger.warning(f"Tool {call.name} failed: {e.code.value}: {e.message}")
        return MCPResponse.failure(e.to_error())
    except Exception as e:
        logger.exception(f"Unexpected error in tool {call.name}")
        return error_response(ErrorCode.INTERNAL_ERROR, f"Unexpected error: {str(e)}")
    return MCPResponse.success(content)

async def handle_request(request: MCPRequest) -> MCPResponse:
    """Route a parsed request to the matching top-level operation"""
    if request.method == "list_tools":
        return handle_list_tools()
    if request.method == "call_tool":
        return await handle_call_tool(request.params)
    return error_response(ErrorCode.METHOD_NOT_FOUND, f"Unknown method: {request.method}")

async def handle_line(line: str) -> MCPResponse:
    """Parse one input line and produce exactly one response"""
    try:
        request = MCPRequest.model_validate_json(line)
    except ValidationError:
        logger.debug(f"Rejected malformed request line: {line!r}")
        return error_response(ErrorCode.INVALID_REQUEST, "Failed to parse request")
    return await handle_request(request)

def write_response(stdout: TextIO, response: MCPResponse) -> None:
    stdout.write(response.to_line() + "\n")
    stdout.flush()

def serve(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """
    Answer requests from ``stdin`` until it is exhausted

    Lines are read on the calling thread and handled one at a time on a
    single background event loop, which also owns the shared HTTP client.
    """
    if stdin is None:
        stdin = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", errors="replace")
    if stdout is None:
        stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8")

    with start_blocking_portal() as portal:
        try:
            for line in stdin:
                response = portal.call(handle_line, line)
                write_response(stdout, response)
        finally:
            portal.call(cleanup_client)

def _handle_shutdown(signum: int, frame: Any) -> None:
    logger.info(f"Received {signal.Signals(signum).name}, shutting down server...")
    raise SystemExit(0)

def main() -> None:
    """Run the bridge with stdio communication"""
    if not HA_TOKEN:
        logger.error("HA_TOKEN environment variable is required")
        sys.exit(1)

    signal.signal(signal.SIGINT, _handle_shutdown)
    signal.signal(signal.SIGTERM, _handle_shutdown)

    logger.info(f"Home Assistant bridge running on stdio (Home Assistant at {HA_URL})")
    try:
        serve()
    except OSError as e:
        logger.error(f"Error reading standard input: {e}")
        sys.exit(1)
    logger.info("Standard input closed, exiting")
