from typing import ClassVar

from pydantic import Field
from typing_extensions import Literal

from wikibase_claims.models.datatypes import Datatype
from wikibase_claims.models.identifiers import Property
from .base import Value


class PropertyValue(Value):
    kind: Literal["property"] = Field(default="property", frozen=True)
    value: Property

    datatype: ClassVar[Datatype] = Datatype.WIKIBASE_PROPERTY
    datavalue_type: ClassVar[str] = "wikibase-entityid"
