import logging
from typing import Optional

from wikibase_claims.models.identifiers import Property
from wikibase_claims.models.values import Value
from wikibase_claims.property_registry import PropertyRegistry, get_registry
from wikibase_claims.tree import Node, first_child, require_attribute
from .snak_parser import parse_snak

logger = logging.getLogger(__name__)


def parse_qualifiers(
    qualifiers_node: Node, registry: Optional[PropertyRegistry] = None
) -> dict[Property, list[Value]]:
    """Decode ``qualifiers/property/qualifiers`` into values grouped by property.

    Values keep document order within a property and properties keep the
    order they first appear in. Markup whose first child is not a
    ``property`` node yields no qualifiers.
    """
    registry = get_registry(registry)
    qualifiers: dict[Property, list[Value]] = {}

    first = first_child(qualifiers_node)
    if first is None or first.name != "property":
        return qualifiers

    for property_node in qualifiers_node.children():
        if property_node.name != "property":
            continue
        prop = registry.resolve(require_attribute(property_node, "id"))
        for snak_node in property_node.children():
            snak = parse_snak(snak_node, registry)
            if snak.value is None:
                logger.debug(f"Skipping {snak.snaktype.value} qualifier {snak.property} ({snak.datatype})")
                continue
            qualifiers.setdefault(prop, []).append(snak.value)

    return qualifiers
