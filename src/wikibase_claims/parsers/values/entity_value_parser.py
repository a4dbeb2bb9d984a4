from wikibase_claims.exceptions import MalformedValue
from wikibase_claims.models.identifiers import Item
from wikibase_claims.models.values import EntityValue
from wikibase_claims.tree import Node
from .common import value_node


def parse_entity_value(datavalue: Node) -> EntityValue:
    node = value_node(datavalue, "wikibase-entityid")
    entity_type = node.get("entity-type")
    if entity_type != "item":
        raise MalformedValue(f"wikibase-item value must have entity-type 'item', got {entity_type!r}")

    numeric_id = node.get("numeric-id")
    if numeric_id is not None:
        return EntityValue(value=Item.from_numeric_id(numeric_id))
    entity_id = node.get("id")
    if entity_id is None:
        raise MalformedValue("wikibase-item value has neither numeric-id nor id")
    return EntityValue(value=Item(id=entity_id))
