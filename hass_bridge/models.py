"""Pydantic models for the Home Assistant stdio bridge."""
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, field_validator


class MCPRequest(BaseModel):
    """A single request line read from stdin."""
    type: Optional[str] = None
    method: str = ""
    params: Optional[Any] = None

    @field_validator("method", mode="before")
    @classmethod
    def null_method_is_empty(cls, v):
        """A null method is handled like a missing one."""
        return "" if v is None else v


class MCPError(BaseModel):
    """Error object carried by an error response."""
    code: str
    message: str


class MCPResponse(BaseModel):
    """A single response line written to stdout."""
    type: Literal["response", "error"]
    content: Optional[Any] = None
    error: Optional[MCPError] = None

    @classmethod
    def success(cls, content: Any) -> "MCPResponse":
        return cls(type="response", content=content)

    @classmethod
    def failure(cls, error: MCPError) -> "MCPResponse":
        return cls(type="error", error=error)

    def to_line(self) -> str:
        """Serialize to a compact JSON line without the absent fields."""
        return self.model_dump_json(exclude_none=True)


class CallToolParams(BaseModel):
    """Parameters of a ``call_tool`` request."""
    name: str = ""
    arguments: Optional[Dict[str, Any]] = None


class GetStateParams(BaseModel):
    """Parameters for retrieving a specific Home Assistant entity."""
    entity_id: str = Field(
        min_length=1,
        description="The entity ID to retrieve (e.g., 'light.living_room')"
    )


class ToggleEntityParams(BaseModel):
    """Parameters for switching an entity on or off."""
    entity_id: str = Field(
        min_length=1,
        description="The entity ID to switch (e.g., 'switch.bedroom')"
    )
    state: Literal["on", "off"] = Field(
        description="The desired state ('on' or 'off')"
    )


class TriggerAutomationParams(BaseModel):
    """Parameters for triggering an automation."""
    automation_id: str = Field(
        min_length=1,
        description="The automation entity ID to trigger (e.g., 'automation.morning_routine')"
    )


class ListEntitiesParams(BaseModel):
    """Parameters for filtering entities when listing from Home Assistant."""
    domain: Optional[str] = Field(
        description="Optional domain to filter entities by (e.g., 'light', 'switch', 'automation')",
        default=None
    )
