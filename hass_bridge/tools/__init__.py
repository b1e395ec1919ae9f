"""Home Assistant tools exposed by the bridge."""
from typing import Dict

from .automation import trigger_automation
from .base import ToolHandler
from .catalog import TOOLS
from .entity import get_state, list_entities, toggle_entity

TOOL_HANDLERS: Dict[str, ToolHandler] = {
    "get_state": get_state,
    "toggle_entity": toggle_entity,
    "trigger_automation": trigger_automation,
    "list_entities": list_entities,
}

__all__ = [
    'TOOLS',
    'TOOL_HANDLERS',
    'get_state',
    'toggle_entity',
    'trigger_automation',
    'list_entities',
]
