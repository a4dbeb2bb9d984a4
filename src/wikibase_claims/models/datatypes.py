from enum import Enum
from typing import Optional


class Datatype(str, Enum):
    WIKIBASE_ITEM = "wikibase-item"
    WIKIBASE_PROPERTY = "wikibase-property"
    COMMONS_MEDIA = "commonsMedia"
    STRING = "string"
    URL = "url"
    MONOLINGUALTEXT = "monolingualtext"
    TIME = "time"
    GLOBE_COORDINATE = "globe-coordinate"
    QUANTITY = "quantity"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> Optional["Datatype"]:
        """Look up a datatype tag case-insensitively.

        Returns None for missing or unknown tags (e.g. "geo-shape"), which
        decoders treat as a snak without a modeled value.
        """
        if tag is None:
            return None
        lowered = tag.lower()
        for datatype in cls:
            if datatype.value.lower() == lowered:
                return datatype
        return None
