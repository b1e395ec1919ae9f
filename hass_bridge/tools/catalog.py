"""The fixed list of tools advertised by ``list_tools``."""
from typing import List

from mcp.types import Tool

TOOLS: List[Tool] = [
    Tool(
        name="get_state",
        description="Get the current state of a Home Assistant entity",
        inputSchema={
            "type": "object",
            "properties": {
                "entity_id": {
                    "type": "string",
                    "description": "The entity ID to get the state of (e.g. light.living_room)",
                },
            },
            "required": ["entity_id"],
        },
    ),
    Tool(
        name="toggle_entity",
        description="Turn a Home Assistant entity on or off",
        inputSchema={
            "type": "object",
            "properties": {
                "entity_id": {
                    "type": "string",
                    "description": "The entity ID to switch (e.g. switch.bedroom)",
                },
                "state": {
                    "type": "string",
                    "description": "The desired state (on/off)",
                    "enum": ["on", "off"],
                },
            },
            "required": ["entity_id", "state"],
        },
    ),
    Tool(
        name="trigger_automation",
        description="Trigger a Home Assistant automation",
        inputSchema={
            "type": "object",
            "properties": {
                "automation_id": {
                    "type": "string",
                    "description": "The automation ID to trigger (e.g. automation.morning_routine)",
                },
            },
            "required": ["automation_id"],
        },
    ),
    Tool(
        name="list_entities",
        description="List all entities available in Home Assistant",
        inputSchema={
            "type": "object",
            "properties": {
                "domain": {
                    "type": "string",
                    "description": "Optional domain filter (e.g. light, switch, automation)",
                },
            },
        },
    ),
]
