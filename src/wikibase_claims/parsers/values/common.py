import logging
from typing import Optional

from wikibase_claims.config import settings
from wikibase_claims.exceptions import MalformedValue
from wikibase_claims.models.identifiers import ITEM_ID_PATTERN, Item
from wikibase_claims.tree import Node, find_child, require_attribute

logger = logging.getLogger(__name__)


def check_datavalue_type(datavalue: Node, expected: str) -> None:
    datavalue_type = datavalue.get("type")
    if datavalue_type is not None and datavalue_type != expected:
        raise MalformedValue(f"Expected datavalue of type {expected}, got {datavalue_type}")


def value_node(datavalue: Node, expected_type: str) -> Node:
    """Return the ``value`` child of a structured datavalue."""
    check_datavalue_type(datavalue, expected_type)
    node = find_child(datavalue, "value")
    if node is None:
        raise MalformedValue(f"{expected_type} datavalue has no <value> node")
    return node


def scalar_value(datavalue: Node, expected_type: str = "string") -> str:
    """Return ``datavalue@value`` for datatypes carried as a plain string."""
    check_datavalue_type(datavalue, expected_type)
    return require_attribute(datavalue, "value")


def parse_int(node: Node, attribute: str, default: Optional[int] = None) -> int:
    raw = node.get(attribute)
    if raw is None:
        if default is None:
            raise MalformedValue(f"<{node.name}> is missing required attribute '{attribute}'")
        return default
    try:
        return int(raw)
    except ValueError:
        raise MalformedValue(f"Attribute '{attribute}' is not an integer: {raw!r}") from None


def parse_float(node: Node, attribute: str, required: bool = True) -> Optional[float]:
    raw = node.get(attribute)
    if raw is None or (not required and raw == ""):
        if required:
            raise MalformedValue(f"<{node.name}> is missing required attribute '{attribute}'")
        return None
    try:
        return float(raw)
    except ValueError:
        raise MalformedValue(f"Attribute '{attribute}' is not a number: {raw!r}") from None


def entity_from_uri(uri: Optional[str]) -> Optional[Item]:
    """Recover an item from a concept URI under the configured entity prefix."""
    if not uri or not uri.startswith(settings.entity_uri_prefix):
        if uri and uri != "1":
            logger.debug(f"Ignoring entity URI outside {settings.entity_uri_prefix}: {uri}")
        return None
    entity_id = uri[len(settings.entity_uri_prefix):]
    if not ITEM_ID_PATTERN.fullmatch(entity_id):
        logger.debug(f"Ignoring non-item entity URI: {uri}")
        return None
    return Item(id=entity_id)
