from .identifiers import Item, Property
from .datatypes import Datatype
from .ranks import Rank
from .value_kinds import ValueKind
from .values import (
    CommonsMediaValue,
    EntityValue,
    Era,
    GlobeValue,
    MonolingualValue,
    PropertyValue,
    QuantityValue,
    StringValue,
    TimePrecision,
    TimeValue,
    URLValue,
    Value,
)
from .snak import Snak, SnakType
from .references import Reference
from .claim import Claim

__all__ = [
    "Item",
    "Property",
    "Datatype",
    "Rank",
    "ValueKind",
    "Value",
    "EntityValue",
    "PropertyValue",
    "CommonsMediaValue",
    "StringValue",
    "URLValue",
    "MonolingualValue",
    "TimeValue",
    "TimePrecision",
    "Era",
    "GlobeValue",
    "QuantityValue",
    "Snak",
    "SnakType",
    "Reference",
    "Claim",
]
