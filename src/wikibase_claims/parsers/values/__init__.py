from .entity_value_parser import parse_entity_value
from .property_value_parser import parse_property_value
from .commons_media_value_parser import parse_commons_media_value
from .string_value_parser import parse_string_value
from .url_value_parser import parse_url_value
from .monolingual_value_parser import parse_monolingual_value
from .time_value_parser import parse_time_value
from .globe_value_parser import parse_globe_value
from .quantity_value_parser import parse_quantity_value

__all__ = [
    "parse_entity_value",
    "parse_property_value",
    "parse_commons_media_value",
    "parse_string_value",
    "parse_url_value",
    "parse_monolingual_value",
    "parse_time_value",
    "parse_globe_value",
    "parse_quantity_value",
]
