from typing import ClassVar

from pydantic import AnyUrl, Field, TypeAdapter, ValidationError, field_validator
from typing_extensions import Literal

from wikibase_claims.models.datatypes import Datatype
from .base import Value

_url_adapter = TypeAdapter(AnyUrl)


def validate_absolute_url(v: str) -> str:
    """Check that ``v`` parses as an absolute URL and return it unchanged."""
    try:
        _url_adapter.validate_python(v)
    except ValidationError:
        raise ValueError(f"Not an absolute URL: {v!r}") from None
    return v


class URLValue(Value):
    kind: Literal["url"] = Field(default="url", frozen=True)
    value: str

    datatype: ClassVar[Datatype] = Datatype.URL
    datavalue_type: ClassVar[str] = "string"

    @field_validator("value")
    @classmethod
    def validate_url(cls, v: str) -> str:
        return validate_absolute_url(v)
