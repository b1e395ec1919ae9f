"""Home Assistant automation tools."""
from typing import Any, Dict, Optional

from hass_bridge import hass
from hass_bridge.models import TriggerAutomationParams
from hass_bridge.tools.base import async_handler, parse_arguments, text_content


@async_handler("trigger_automation")
async def trigger_automation(arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Trigger a Home Assistant automation.

    Args:
        arguments: Tool arguments, must contain ``automation_id`` (e.g. 'automation.morning_routine')

    Returns:
        Content payload with a confirmation message
    """
    params = parse_arguments(TriggerAutomationParams, "trigger_automation", arguments)
    await hass.call_service("automation", "trigger", {"entity_id": params.automation_id})
    return text_content(f"Successfully triggered automation {params.automation_id}")
