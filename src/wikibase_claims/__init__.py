"""Decode Wikibase claims from the API's read format and encode them for edits."""

from wikibase_claims.exceptions import (
    EditRejected,
    InvalidIdentifier,
    MalformedValue,
    UnexpectedNodeShape,
    UnrecognizedRank,
    WikibaseError,
)
from wikibase_claims.models import Claim, Item, Property, Rank, Reference, Snak
from wikibase_claims.parsers import parse_claim, parse_claims, parse_edit_response, parse_snak
from wikibase_claims.property_registry import PropertyRegistry
from wikibase_claims.tree import ElementNode, Node, WireNode, parse_xml
from wikibase_claims.wire import encode_claim, encode_reference, encode_snak, encode_value

__all__ = [
    "EditRejected",
    "InvalidIdentifier",
    "MalformedValue",
    "UnexpectedNodeShape",
    "UnrecognizedRank",
    "WikibaseError",
    "Claim",
    "Item",
    "Property",
    "Rank",
    "Reference",
    "Snak",
    "parse_claim",
    "parse_claims",
    "parse_edit_response",
    "parse_snak",
    "PropertyRegistry",
    "ElementNode",
    "Node",
    "WireNode",
    "parse_xml",
    "encode_claim",
    "encode_reference",
    "encode_snak",
    "encode_value",
]
