from typing import ClassVar

from pydantic import Field
from typing_extensions import Literal

from wikibase_claims.models.datatypes import Datatype
from .base import Value


class CommonsMediaValue(Value):
    kind: Literal["commons_media"] = Field(default="commons_media", frozen=True)
    value: str = Field(min_length=1)

    datatype: ClassVar[Datatype] = Datatype.COMMONS_MEDIA
    datavalue_type: ClassVar[str] = "string"
