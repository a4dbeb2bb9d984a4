import re

from pydantic import field_validator

from wikibase_claims.exceptions import InvalidIdentifier
from wikibase_claims.models.base import WikibaseModel

PROPERTY_ID_PATTERN = re.compile(r"[Pp](\d+)")
ITEM_ID_PATTERN = re.compile(r"[Qq](\d+)")


def normalize_property_id(raw: str) -> str:
    match = PROPERTY_ID_PATTERN.fullmatch(raw) if isinstance(raw, str) else None
    if not match:
        raise InvalidIdentifier(f"{raw!r} is not a valid Wikibase property id")
    return f"P{match.group(1)}"


def normalize_item_id(raw: str) -> str:
    match = ITEM_ID_PATTERN.fullmatch(raw) if isinstance(raw, str) else None
    if not match:
        raise InvalidIdentifier(f"{raw!r} is not a valid Wikibase id")
    return f"Q{match.group(1)}"


class Property(WikibaseModel):
    id: str

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: str) -> str:
        return normalize_property_id(v)

    @property
    def numeric_id(self) -> int:
        return int(self.id[1:])

    def __str__(self) -> str:
        return self.id


class Item(WikibaseModel):
    id: str

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: str) -> str:
        return normalize_item_id(v)

    @classmethod
    def from_numeric_id(cls, numeric_id: int | str) -> "Item":
        return cls(id=f"Q{numeric_id}")

    @property
    def numeric_id(self) -> int:
        return int(self.id[1:])

    def __str__(self) -> str:
        return self.id
