from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from wikibase_claims.exceptions import MalformedValue


class WikibaseModel(BaseModel):
    """Frozen pydantic model that reports validation failures as MalformedValue."""

    model_config = ConfigDict(frozen=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise MalformedValue(f"Invalid {type(self).__name__}: {e}") from e
