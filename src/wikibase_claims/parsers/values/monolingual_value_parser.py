from wikibase_claims.models.values import MonolingualValue
from wikibase_claims.tree import Node, require_attribute
from .common import value_node


def parse_monolingual_value(datavalue: Node) -> MonolingualValue:
    node = value_node(datavalue, "monolingualtext")
    return MonolingualValue(
        language=require_attribute(node, "language"),
        text=require_attribute(node, "text"),
    )
