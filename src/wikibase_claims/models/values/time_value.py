import calendar
from enum import Enum, IntEnum
from typing import Any, ClassVar, Optional

from pydantic import Field, field_validator, model_validator
from typing_extensions import Literal

from wikibase_claims.models.datatypes import Datatype
from .base import Value
from .url_value import validate_absolute_url

JULIAN_CALENDAR_ITEM = "Q1985786"


class TimePrecision(IntEnum):
    BILLION_YEARS = 0
    HUNDRED_MILLION_YEARS = 1
    TEN_MILLION_YEARS = 2
    MILLION_YEARS = 3
    HUNDRED_THOUSAND_YEARS = 4
    TEN_THOUSAND_YEARS = 5
    MILLENNIUM = 6
    CENTURY = 7
    DECADE = 8
    YEAR = 9
    MONTH = 10
    DAY = 11
    HOUR = 12
    MINUTE = 13
    SECOND = 14


class Era(str, Enum):
    CE = "CE"
    BCE = "BCE"


class TimeValue(Value):
    """A point in time at a given precision.

    ``year`` is signed as written on the wire: a negative year is a year
    before the common era (``-44`` is 44 BCE), there is no year zero offset.
    Month, day and time of day are only set where the precision reaches them;
    month-precision values carry the first of the month at midnight.
    """

    kind: Literal["time"] = Field(default="time", frozen=True)
    year: int
    month: Optional[int] = Field(default=None, ge=1, le=12)
    day: Optional[int] = Field(default=None, ge=1, le=31)
    hour: Optional[int] = Field(default=None, ge=0, le=23)
    minute: Optional[int] = Field(default=None, ge=0, le=59)
    second: Optional[int] = Field(default=None, ge=0, le=59)
    precision: TimePrecision
    before: int = Field(default=0, ge=0)
    after: int = Field(default=0, ge=0)
    timezone: int = 0
    calendar_model: Optional[str] = None

    datatype: ClassVar[Datatype] = Datatype.TIME
    datavalue_type: ClassVar[str] = "time"

    @model_validator(mode="before")
    @classmethod
    def fill_components(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "precision" not in data:
            return data
        try:
            precision = int(data["precision"])
        except (TypeError, ValueError):
            return data
        data = dict(data)
        if precision < TimePrecision.MONTH:
            for component in ("month", "day", "hour", "minute", "second"):
                data[component] = None
        elif precision == TimePrecision.MONTH:
            data["day"] = 1
            data["hour"] = data["minute"] = data["second"] = 0
        else:
            for component in ("hour", "minute", "second"):
                if data.get(component) is None:
                    data[component] = 0
        return data

    @model_validator(mode="after")
    def validate_components(self) -> "TimeValue":
        if self.precision >= TimePrecision.MONTH and self.month is None:
            raise ValueError(f"Precision {self.precision} requires a month")
        if self.precision >= TimePrecision.DAY and self.day is None:
            raise ValueError(f"Precision {self.precision} requires a day")
        if self.precision >= TimePrecision.DAY and self.day > self._days_in_month():
            raise ValueError(f"Day {self.day} does not exist in month {self.month} of year {self.year}")
        return self

    def _days_in_month(self) -> int:
        # Every fourth Julian year is a leap year, century years included.
        year = self.year_of_era
        if self.month == 2 and year % 4 == 0 and self.is_julian:
            return 29
        return calendar.monthrange(year, self.month)[1]

    @field_validator("calendar_model")
    @classmethod
    def validate_calendar_model(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            validate_absolute_url(v)
        return v

    @property
    def is_julian(self) -> bool:
        return self.calendar_model is not None and self.calendar_model.endswith(f"/{JULIAN_CALENDAR_ITEM}")

    @property
    def era(self) -> Era:
        return Era.BCE if self.year < 0 else Era.CE

    @property
    def year_of_era(self) -> int:
        return abs(self.year)
