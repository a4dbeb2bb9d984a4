from enum import Enum


class ValueKind(str, Enum):
    ENTITY = "entity"
    PROPERTY = "property"
    COMMONS_MEDIA = "commons_media"
    STRING = "string"
    URL = "url"
    MONOLINGUAL = "monolingual"
    TIME = "time"
    GLOBE = "globe"
    QUANTITY = "quantity"
