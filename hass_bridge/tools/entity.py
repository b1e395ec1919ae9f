"""Home Assistant entity-related tools."""
from typing import Any, Dict, Optional

from hass_bridge import hass
from hass_bridge.models import GetStateParams, ListEntitiesParams, ToggleEntityParams
from hass_bridge.tools.base import async_handler, parse_arguments, text_content, to_pretty_json


@async_handler("get_state")
async def get_state(arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Get the current state of a Home Assistant entity.

    Args:
        arguments: Tool arguments, must contain ``entity_id``

    Returns:
        Content payload holding the entity state object as indented JSON
    """
    params = parse_arguments(GetStateParams, "get_state", arguments)
    state = await hass.get_entity_state(params.entity_id)
    return text_content(to_pretty_json(state))


@async_handler("toggle_entity")
async def toggle_entity(arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Switch an entity on or off through the generic ``homeassistant`` domain.

    Args:
        arguments: Tool arguments, must contain ``entity_id`` and ``state`` ('on' or 'off')

    Returns:
        Content payload with a confirmation message
    """
    params = parse_arguments(ToggleEntityParams, "toggle_entity", arguments)
    await hass.call_service("homeassistant", f"turn_{params.state}", {"entity_id": params.entity_id})
    return text_content(f"Successfully set {params.entity_id} to {params.state}")


def simplify_entity(entity: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "entity_id": entity.get("entity_id"),
        "state": entity.get("state"),
        "attributes": entity.get("attributes"),
    }


@async_handler("list_entities")
async def list_entities(arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """List entities from Home Assistant, optionally filtered by domain.

    Entities keep the order Home Assistant returned them in and are reduced
    to their entity_id, state and attributes.
    """
    params = parse_arguments(ListEntitiesParams, "list_entities", arguments)
    entities = await hass.get_entities()

    if params.domain:
        prefix = f"{params.domain}."
        entities = [
            entity for entity in entities
            if isinstance(entity.get("entity_id"), str) and entity["entity_id"].startswith(prefix)
        ]

    return text_content(to_pretty_json([simplify_entity(entity) for entity in entities]))
