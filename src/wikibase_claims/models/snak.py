from enum import Enum
from typing import Optional

from pydantic import model_validator

from wikibase_claims.models.base import WikibaseModel
from wikibase_claims.models.datatypes import Datatype
from wikibase_claims.models.identifiers import Property
from wikibase_claims.models.values import VALUE_TYPES, Value


class SnakType(str, Enum):
    VALUE = "value"
    SOMEVALUE = "somevalue"
    NOVALUE = "novalue"


class Snak(WikibaseModel):
    """One property/value/datatype triple.

    ``datatype`` keeps the tag as received, including tags this package does
    not model; ``value`` is None for those and for somevalue/novalue snaks.
    """

    property: Property
    datatype: Optional[str] = None
    value: Optional[Value] = None
    snaktype: SnakType = SnakType.VALUE

    @model_validator(mode="after")
    def validate_value_matches_datatype(self) -> "Snak":
        if self.value is None:
            return self
        if self.snaktype != SnakType.VALUE:
            raise ValueError(f"A {self.snaktype.value} snak cannot carry a value")
        expected = Datatype.from_tag(self.datatype)
        if expected is not None and not isinstance(self.value, VALUE_TYPES[expected]):
            raise ValueError(
                f"Datatype {self.datatype} cannot carry a {self.value.kind} value"
            )
        return self

    @classmethod
    def for_value(cls, property: Property, value: Value) -> "Snak":
        return cls(property=property, datatype=value.datatype.value, value=value)
