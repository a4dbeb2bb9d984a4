from .base import Value
from .entity_value import EntityValue
from .property_value import PropertyValue
from .commons_media_value import CommonsMediaValue
from .string_value import StringValue
from .url_value import URLValue
from .monolingual_value import MonolingualValue
from .time_value import Era, TimePrecision, TimeValue
from .globe_value import GlobeValue
from .quantity_value import QuantityValue

VALUE_TYPES = {
    value_type.datatype: value_type
    for value_type in (
        EntityValue,
        PropertyValue,
        CommonsMediaValue,
        StringValue,
        URLValue,
        MonolingualValue,
        TimeValue,
        GlobeValue,
        QuantityValue,
    )
}

__all__ = [
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
    "VALUE_TYPES",
]
