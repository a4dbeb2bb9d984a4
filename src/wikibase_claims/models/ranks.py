from enum import Enum

from wikibase_claims.exceptions import UnrecognizedRank


class Rank(str, Enum):
    PREFERRED = "preferred"
    NORMAL = "normal"
    DEPRECATED = "deprecated"

    @classmethod
    def from_wire(cls, rank: str) -> "Rank":
        try:
            return cls(rank)
        except ValueError:
            raise UnrecognizedRank(f"Unrecognized rank: {rank!r}") from None
