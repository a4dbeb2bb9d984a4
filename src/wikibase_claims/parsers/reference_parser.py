from typing import Optional

from wikibase_claims.models.references import Reference
from wikibase_claims.property_registry import PropertyRegistry, get_registry
from wikibase_claims.tree import Node, children_named, find_child
from .snak_parser import parse_snak


def parse_reference(reference_node: Node, registry: Optional[PropertyRegistry] = None) -> Reference:
    registry = get_registry(registry)
    reference_hash = reference_node.get("hash")

    snaks_node = find_child(reference_node, "snaks") if reference_node.name == "reference" else None
    if snaks_node is None:
        return Reference(hash=reference_hash)

    snaks = []
    for property_node in children_named(snaks_node, "property"):
        for snak_node in property_node.children():
            snaks.append(parse_snak(snak_node, registry))

    return Reference(snaks=tuple(snaks), hash=reference_hash)


def parse_references(references_node: Node, registry: Optional[PropertyRegistry] = None) -> list[Reference]:
    registry = get_registry(registry)
    return [parse_reference(reference_node, registry) for reference_node in references_node.children()]
