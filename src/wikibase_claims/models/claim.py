from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from wikibase_claims.exceptions import MalformedValue
from wikibase_claims.models.identifiers import Property
from wikibase_claims.models.ranks import Rank
from wikibase_claims.models.references import Reference
from wikibase_claims.models.snak import Snak
from wikibase_claims.models.values import Value


class Claim(BaseModel):
    """A statement about an entity.

    Unlike values and snaks a claim stays mutable: qualifiers and reference
    groups are added one at a time while the claim is assembled or edited.
    Reference groups form a set: equal groups collapse into the first one seen
    and two claims compare equal whatever order their groups are in.
    """

    id: Optional[str] = None
    rank: Rank = Rank.NORMAL
    type: str = "statement"
    property: Property
    mainsnak: Snak
    qualifiers: dict[Property, list[Value]] = {}
    references: list[Reference] = []

    model_config = ConfigDict(validate_assignment=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise MalformedValue(f"Invalid Claim: {e}") from e

    @field_validator("references")
    @classmethod
    def deduplicate_references(cls, v: list[Reference]) -> list[Reference]:
        return list(dict.fromkeys(v))

    @model_validator(mode="before")
    @classmethod
    def property_from_mainsnak(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("property") is None:
            mainsnak = data.get("mainsnak")
            if isinstance(mainsnak, Snak):
                data = {**data, "property": mainsnak.property}
        return data

    @model_validator(mode="after")
    def validate_mainsnak_property(self) -> "Claim":
        if self.mainsnak.property != self.property:
            raise ValueError(
                f"Mainsnak property {self.mainsnak.property} does not match claim property {self.property}"
            )
        return self

    @property
    def value(self) -> Optional[Value]:
        return self.mainsnak.value

    def add_qualifier(self, property: Property, value: Value) -> None:
        self.qualifiers.setdefault(property, []).append(value)

    def add_reference(self, reference: Reference) -> None:
        if reference not in self.references:
            self.references.append(reference)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Claim):
            return NotImplemented
        return (
            self.id == other.id
            and self.rank == other.rank
            and self.type == other.type
            and self.property == other.property
            and self.mainsnak == other.mainsnak
            and self.qualifiers == other.qualifiers
            and set(self.references) == set(other.references)
        )
