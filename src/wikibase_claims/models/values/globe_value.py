from typing import ClassVar, Optional

from pydantic import Field
from typing_extensions import Literal

from wikibase_claims.models.datatypes import Datatype
from wikibase_claims.models.identifiers import Item
from .base import Value


class GlobeValue(Value):
    kind: Literal["globe"] = Field(default="globe", frozen=True)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=360)
    precision: Optional[float] = Field(default=None, gt=0)
    globe: Optional[Item] = None

    datatype: ClassVar[Datatype] = Datatype.GLOBE_COORDINATE
    datavalue_type: ClassVar[str] = "globecoordinate"
