from typing import Optional

from pydantic import field_validator

from wikibase_claims.models.base import WikibaseModel
from wikibase_claims.models.identifiers import Property
from wikibase_claims.models.snak import Snak


class Reference(WikibaseModel):
    """A reference group.

    Snaks keep the order they were first seen in so encoding is reproducible,
    but two groups holding the same snaks are equal regardless of order.
    """

    snaks: tuple[Snak, ...] = ()
    hash: Optional[str] = None

    @field_validator("snaks")
    @classmethod
    def deduplicate(cls, v: tuple[Snak, ...]) -> tuple[Snak, ...]:
        return tuple(dict.fromkeys(v))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reference):
            return NotImplemented
        return frozenset(self.snaks) == frozenset(other.snaks)

    def __hash__(self) -> int:
        return hash(frozenset(self.snaks))

    def __len__(self) -> int:
        return len(self.snaks)

    def grouped_by_property(self) -> dict[Property, list[Snak]]:
        grouped: dict[Property, list[Snak]] = {}
        for snak in self.snaks:
            grouped.setdefault(snak.property, []).append(snak)
        return grouped
