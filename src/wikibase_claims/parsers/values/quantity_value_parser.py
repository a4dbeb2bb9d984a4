from wikibase_claims.models.values import QuantityValue
from wikibase_claims.tree import Node
from .common import entity_from_uri, parse_float, value_node


def parse_quantity_value(datavalue: Node) -> QuantityValue:
    node = value_node(datavalue, "quantity")
    return QuantityValue(
        amount=parse_float(node, "amount"),
        lower_bound=parse_float(node, "lowerBound", required=False),
        upper_bound=parse_float(node, "upperBound", required=False),
        unit=entity_from_uri(node.get("unit")),
    )
