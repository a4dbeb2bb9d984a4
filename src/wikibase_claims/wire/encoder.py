"""Compact JSON encoding of values, snaks, references and claims for edit requests.

The ``*_to_wire`` functions build plain JSON-ready structures; the ``encode_*``
functions render them as compact strings. Nothing here percent-encodes.
"""

import json
import logging
from decimal import Decimal
from typing import Any

from wikibase_claims.config import settings
from wikibase_claims.exceptions import MalformedValue
from wikibase_claims.models.claim import Claim
from wikibase_claims.models.references import Reference
from wikibase_claims.models.snak import Snak, SnakType
from wikibase_claims.models.value_kinds import ValueKind
from wikibase_claims.models.values import TimePrecision, TimeValue, Value

logger = logging.getLogger(__name__)


def _dumps(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def format_decimal(value: float) -> str:
    """Format a float as a signed decimal string without exponent ("+0.00001")."""
    text = format(Decimal(repr(value)), "f")
    return text if text.startswith("-") else f"+{text}"


def format_time(value: TimeValue) -> str:
    """Render the ``time`` string: sign, zero-padded year, then the rest.

    Components below the precision are written as zeros, the way the API
    writes them.
    """
    sign = "-" if value.year < 0 else "+"
    year = f"{value.year_of_era:04d}"
    if value.precision < TimePrecision.MONTH:
        return f"{sign}{year}-00-00T00:00:00Z"
    if value.precision == TimePrecision.MONTH:
        return f"{sign}{year}-{value.month:02d}-00T00:00:00Z"
    return (
        f"{sign}{year}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}Z"
    )


def value_to_wire(value: Value) -> Any:
    """Build the ``datavalue.value`` member for a value."""
    kind = value.kind

    if kind == ValueKind.ENTITY:
        return {
            "entity-type": "item",
            "numeric-id": value.value.numeric_id,
            "id": value.value.id,
        }

    elif kind == ValueKind.PROPERTY:
        return {
            "entity-type": "property",
            "numeric-id": value.value.numeric_id,
            "id": value.value.id,
        }

    elif kind in (ValueKind.COMMONS_MEDIA, ValueKind.STRING, ValueKind.URL):
        return value.value

    elif kind == ValueKind.MONOLINGUAL:
        return {"text": value.text, "language": value.language}

    elif kind == ValueKind.TIME:
        return {
            "time": format_time(value),
            "timezone": value.timezone,
            "before": value.before,
            "after": value.after,
            "precision": int(value.precision),
            "calendarmodel": value.calendar_model or settings.default_calendar_model,
        }

    elif kind == ValueKind.GLOBE:
        globe = settings.entity_uri(value.globe.id) if value.globe else settings.default_globe_uri()
        return {
            "latitude": value.latitude,
            "longitude": value.longitude,
            "precision": value.precision,
            "globe": globe,
        }

    elif kind == ValueKind.QUANTITY:
        quantity = {
            "amount": format_decimal(value.amount),
            "unit": settings.entity_uri(value.unit.id) if value.unit else "1",
        }
        if value.upper_bound is not None:
            quantity["upperBound"] = format_decimal(value.upper_bound)
        if value.lower_bound is not None:
            quantity["lowerBound"] = format_decimal(value.lower_bound)
        return quantity

    raise TypeError(f"Cannot encode value of kind {kind!r}")


def datavalue_to_wire(value: Value) -> dict[str, Any]:
    return {"value": value_to_wire(value), "type": value.datavalue_type}


def snak_to_wire(snak: Snak) -> dict[str, Any]:
    data: dict[str, Any] = {"snaktype": snak.snaktype.value, "property": snak.property.id}
    if snak.snaktype == SnakType.VALUE:
        if snak.value is None:
            raise MalformedValue(f"Snak for {snak.property} with datatype {snak.datatype!r} has no value to encode")
        data["datavalue"] = datavalue_to_wire(snak.value)
    if snak.datatype is not None:
        data["datatype"] = snak.datatype
    elif snak.value is not None:
        data["datatype"] = snak.value.datatype.value
    return data


def reference_to_wire(reference: Reference) -> dict[str, list[dict[str, Any]]]:
    """Group a reference's snaks by property, in first-seen order."""
    return {
        prop.id: [snak_to_wire(snak) for snak in snaks]
        for prop, snaks in reference.grouped_by_property().items()
    }


def claim_to_wire(claim: Claim) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if claim.id is not None:
        data["id"] = claim.id
    data["type"] = claim.type
    data["mainsnak"] = snak_to_wire(claim.mainsnak)
    data["rank"] = claim.rank.value

    if claim.qualifiers:
        data["qualifiers"] = {
            prop.id: [snak_to_wire(Snak.for_value(prop, value)) for value in values]
            for prop, values in claim.qualifiers.items()
        }

    if claim.references:
        references = []
        for reference in claim.references:
            encoded: dict[str, Any] = {"snaks": reference_to_wire(reference)}
            if reference.hash:
                encoded["hash"] = reference.hash
            references.append(encoded)
        data["references"] = references

    logger.debug(f"Encoded claim {claim.id} for {claim.property}")
    return data


def encode_value(value: Value) -> str:
    return _dumps(value_to_wire(value))


def encode_snak(snak: Snak) -> str:
    return _dumps(snak_to_wire(snak))


def encode_reference(reference: Reference) -> str:
    return _dumps(reference_to_wire(reference))


def encode_claim(claim: Claim) -> str:
    return _dumps(claim_to_wire(claim))
