"""Error codes and the exception used to report tool failures."""
from enum import Enum

from hass_bridge.models import MCPError


class ErrorCode(str, Enum):
    """Error codes sent back in the ``error.code`` field of a response."""

    INVALID_REQUEST = "InvalidRequest"
    METHOD_NOT_FOUND = "MethodNotFound"
    INVALID_PARAMS = "InvalidParams"
    INTERNAL_ERROR = "InternalError"
    HOME_ASSISTANT_API_ERROR = "HomeAssistantAPIError"


class ToolError(Exception):
    """Raised when a request cannot be served.

    Carries the wire error code alongside a human readable message so the
    dispatcher can turn it into an error response unchanged.
    """

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_error(self) -> MCPError:
        return MCPError(code=self.code.value, message=self.message)
