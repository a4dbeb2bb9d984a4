from typing import ClassVar

from pydantic import Field
from typing_extensions import Literal

from wikibase_claims.models.datatypes import Datatype
from wikibase_claims.models.identifiers import Item
from .base import Value


class EntityValue(Value):
    kind: Literal["entity"] = Field(default="entity", frozen=True)
    value: Item

    datatype: ClassVar[Datatype] = Datatype.WIKIBASE_ITEM
    datavalue_type: ClassVar[str] = "wikibase-entityid"
