from typing import ClassVar

from pydantic import Field
from typing_extensions import Literal

from wikibase_claims.models.datatypes import Datatype
from .base import Value


class StringValue(Value):
    kind: Literal["string"] = Field(default="string", frozen=True)
    value: str

    datatype: ClassVar[Datatype] = Datatype.STRING
    datavalue_type: ClassVar[str] = "string"
