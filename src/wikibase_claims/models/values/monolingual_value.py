from typing import ClassVar

from pydantic import Field, field_validator
from typing_extensions import Literal

from wikibase_claims.models.datatypes import Datatype
from .base import Value


class MonolingualValue(Value):
    kind: Literal["monolingual"] = Field(default="monolingual", frozen=True)
    language: str = Field(min_length=1)
    text: str

    datatype: ClassVar[Datatype] = Datatype.MONOLINGUALTEXT
    datavalue_type: ClassVar[str] = "monolingualtext"

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if "\n" in v or "\r" in v:
            raise ValueError("MonolingualText text must not contain newline characters")
        return v
