from wikibase_claims.models.values import GlobeValue
from wikibase_claims.tree import Node
from .common import entity_from_uri, parse_float, value_node


def parse_globe_value(datavalue: Node) -> GlobeValue:
    node = value_node(datavalue, "globecoordinate")
    return GlobeValue(
        latitude=parse_float(node, "latitude"),
        longitude=parse_float(node, "longitude"),
        precision=parse_float(node, "precision", required=False),
        globe=entity_from_uri(node.get("globe")),
    )
