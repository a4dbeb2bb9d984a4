from wikibase_claims.parsers.claim_parser import parse_claim, parse_claims
from wikibase_claims.parsers.qualifier_parser import parse_qualifiers
from wikibase_claims.parsers.reference_parser import parse_references, parse_reference
from wikibase_claims.parsers.response_parser import parse_edit_response
from wikibase_claims.parsers.snak_parser import parse_snak

__all__ = [
    "parse_claim",
    "parse_claims",
    "parse_qualifiers",
    "parse_references",
    "parse_reference",
    "parse_edit_response",
    "parse_snak",
]
