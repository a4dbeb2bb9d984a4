import logging
from functools import partial
from typing import Callable, Optional

from wikibase_claims.exceptions import MalformedValue, UnexpectedNodeShape
from wikibase_claims.models.datatypes import Datatype
from wikibase_claims.models.snak import Snak, SnakType
from wikibase_claims.models.values import Value
from wikibase_claims.property_registry import PropertyRegistry, get_registry
from wikibase_claims.tree import Node, find_child
from .values import (
    parse_commons_media_value,
    parse_entity_value,
    parse_globe_value,
    parse_monolingual_value,
    parse_property_value,
    parse_quantity_value,
    parse_string_value,
    parse_time_value,
    parse_url_value,
)

logger = logging.getLogger(__name__)

PARSERS: dict[Datatype, Callable[[Node], Value]] = {
    Datatype.WIKIBASE_ITEM: parse_entity_value,
    Datatype.WIKIBASE_PROPERTY: parse_property_value,
    Datatype.COMMONS_MEDIA: parse_commons_media_value,
    Datatype.STRING: parse_string_value,
    Datatype.URL: parse_url_value,
    Datatype.MONOLINGUALTEXT: parse_monolingual_value,
    Datatype.TIME: parse_time_value,
    Datatype.GLOBE_COORDINATE: parse_globe_value,
    Datatype.QUANTITY: parse_quantity_value,
}


def _value_parser(datatype: Datatype, registry: PropertyRegistry) -> Callable[[Node], Value]:
    parser = PARSERS[datatype]
    if datatype == Datatype.WIKIBASE_PROPERTY:
        return partial(parser, registry=registry)
    return parser


def parse_snak(snak_node: Node, registry: Optional[PropertyRegistry] = None) -> Snak:
    registry = get_registry(registry)

    property_id = snak_node.get("property")
    if property_id is None:
        raise UnexpectedNodeShape(f"<{snak_node.name}> has no property attribute")
    prop = registry.resolve(property_id)

    datatype_tag = snak_node.get("datatype")
    try:
        snaktype = SnakType(snak_node.get("snaktype") or SnakType.VALUE.value)
    except ValueError:
        raise MalformedValue(f"Unknown snaktype: {snak_node.get('snaktype')!r}") from None

    snak = Snak(property=prop, datatype=datatype_tag, snaktype=snaktype)
    if snaktype != SnakType.VALUE:
        return snak

    datatype = Datatype.from_tag(datatype_tag)
    if datatype is None:
        logger.debug(f"No value model for datatype {datatype_tag!r} of {prop}, leaving value unset")
        return snak

    datavalue = find_child(snak_node, "datavalue")
    if datavalue is None:
        logger.debug(f"Snak for {prop} has no datavalue")
        return snak

    value = _value_parser(datatype, registry)(datavalue)
    return Snak(property=prop, datatype=datatype_tag, value=value, snaktype=snaktype)
