import logging
from typing import Optional

from wikibase_claims.exceptions import UnexpectedNodeShape, WikibaseError
from wikibase_claims.models.claim import Claim
from wikibase_claims.models.ranks import Rank
from wikibase_claims.property_registry import PropertyRegistry, get_registry
from wikibase_claims.tree import Node, children_named, expect_name
from .qualifier_parser import parse_qualifiers
from .reference_parser import parse_references
from .snak_parser import parse_snak

logger = logging.getLogger(__name__)


def parse_claim(claim_node: Node, registry: Optional[PropertyRegistry] = None) -> Claim:
    expect_name(claim_node, "claim")
    registry = get_registry(registry)

    claim_id = claim_node.get("id")
    rank = claim_node.get("rank")
    if rank is None:
        raise UnexpectedNodeShape(f"Claim {claim_id} has no rank attribute")

    mainsnak = None
    qualifiers = {}
    references = []
    for child in claim_node.children():
        if child.name == "mainsnak":
            mainsnak = parse_snak(child, registry)
        elif child.name == "qualifiers":
            qualifiers = parse_qualifiers(child, registry)
        elif child.name == "references":
            references = parse_references(child, registry)

    if mainsnak is None:
        raise UnexpectedNodeShape(f"Claim {claim_id} has no mainsnak")

    return Claim(
        id=claim_id,
        rank=Rank.from_wire(rank),
        type=claim_node.get("type") or "statement",
        property=mainsnak.property,
        mainsnak=mainsnak,
        qualifiers=qualifiers,
        references=references,
    )


def parse_claims(
    claims_node: Node, registry: Optional[PropertyRegistry] = None, strict: bool = True
) -> list[Claim]:
    """Decode every ``claims/property/claim`` node of an entity.

    With ``strict=False`` a claim that fails to decode is logged and skipped
    instead of aborting the whole list.
    """
    expect_name(claims_node, "claims")
    registry = get_registry(registry)

    claims = []
    for property_node in children_named(claims_node, "property"):
        property_id = property_node.get("id")
        for claim_node in children_named(property_node, "claim"):
            try:
                claims.append(parse_claim(claim_node, registry))
            except WikibaseError as e:
                if strict:
                    raise
                logger.warning(f"Failed to parse claim {claim_node.get('id')} for property {property_id}: {e}")
                continue

    return claims
