from typing import Optional

from wikibase_claims.exceptions import MalformedValue
from wikibase_claims.models.values import PropertyValue
from wikibase_claims.property_registry import PropertyRegistry, get_registry
from wikibase_claims.tree import Node, require_attribute
from .common import value_node


def parse_property_value(datavalue: Node, registry: Optional[PropertyRegistry] = None) -> PropertyValue:
    node = value_node(datavalue, "wikibase-entityid")
    entity_type = node.get("entity-type")
    if entity_type is not None and entity_type != "property":
        raise MalformedValue(f"wikibase-property value must have entity-type 'property', got {entity_type!r}")

    numeric_id = require_attribute(node, "numeric-id")
    return PropertyValue(value=get_registry(registry).resolve(f"P{numeric_id}"))
