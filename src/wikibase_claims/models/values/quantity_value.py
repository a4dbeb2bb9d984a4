from typing import ClassVar, Optional

from pydantic import Field, model_validator
from typing_extensions import Literal

from wikibase_claims.models.datatypes import Datatype
from wikibase_claims.models.identifiers import Item
from .base import Value


class QuantityValue(Value):
    kind: Literal["quantity"] = Field(default="quantity", frozen=True)
    amount: float
    lower_bound: Optional[float] = None
    upper_bound: Optional[float] = None
    unit: Optional[Item] = None

    datatype: ClassVar[Datatype] = Datatype.QUANTITY
    datavalue_type: ClassVar[str] = "quantity"

    @model_validator(mode="after")
    def validate_bounds(self) -> "QuantityValue":
        lower = self.lower_bound
        upper = self.upper_bound

        if lower is not None and upper is not None and lower > upper:
            raise ValueError("Lower bound cannot be greater than upper bound")
        if lower is not None and lower > self.amount:
            raise ValueError("Lower bound cannot be greater than amount")
        if upper is not None and upper < self.amount:
            raise ValueError("Upper bound cannot be less than amount")
        return self
