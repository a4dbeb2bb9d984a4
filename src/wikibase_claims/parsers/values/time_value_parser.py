import logging
import re
from typing import Optional

from wikibase_claims.exceptions import MalformedValue
from wikibase_claims.models.values import TimePrecision, TimeValue, URLValue
from wikibase_claims.tree import Node, require_attribute
from .common import parse_int, value_node

logger = logging.getLogger(__name__)

YEAR_PATTERN = re.compile(r"([+-])?(\d+).*")
YEAR_MONTH_PATTERN = re.compile(r"([+-])?(\d+)-(\d+).*")
DATE_TIME_PATTERN = re.compile(r"([+-])?(\d+)-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})Z")


def parse_time_value(datavalue: Node) -> TimeValue:
    node = value_node(datavalue, "time")
    time = require_attribute(node, "time")
    precision = parse_int(node, "precision")

    if precision < TimePrecision.MONTH:
        components = _parse_year(time)
    elif precision == TimePrecision.MONTH:
        components = _parse_year_month(time)
    else:
        components = _parse_date_time(time)

    return TimeValue(
        **components,
        precision=precision,
        before=parse_int(node, "before", default=0),
        after=parse_int(node, "after", default=0),
        timezone=parse_int(node, "timezone", default=0),
        calendar_model=_parse_calendar_model(node),
    )


def _signed_year(sign: Optional[str], digits: str) -> int:
    year = int(digits)
    return -year if sign == "-" else year


def _parse_year(time: str) -> dict:
    # Month and day digits are meaningless below month precision.
    match = YEAR_PATTERN.fullmatch(time)
    if not match:
        raise MalformedValue(f"Cannot extract a year from time {time!r}")
    sign, digits = match.groups()
    return {"year": _signed_year(sign, digits)}


def _parse_year_month(time: str) -> dict:
    match = YEAR_MONTH_PATTERN.fullmatch(time)
    if not match:
        raise MalformedValue(f"Cannot extract year and month from time {time!r}")
    sign, digits, month = match.groups()
    return {"year": _signed_year(sign, digits), "month": int(month)}


def _parse_date_time(time: str) -> dict:
    match = DATE_TIME_PATTERN.fullmatch(time)
    if not match:
        raise MalformedValue(f"Time {time!r} is not in format '+%Y-%m-%dT%H:%M:%SZ'")
    sign, digits, month, day, hour, minute, second = match.groups()
    # A leading '-' marks the era; the digits are already the year of that era.
    return {
        "year": _signed_year(sign, digits),
        "month": int(month),
        "day": int(day),
        "hour": int(hour),
        "minute": int(minute),
        "second": int(second),
    }


def _parse_calendar_model(node: Node) -> Optional[str]:
    calendar_model = node.get("calendarmodel")
    if calendar_model is None:
        logger.debug("Time value has no calendar model")
        return None
    try:
        return URLValue(value=calendar_model).value
    except MalformedValue:
        logger.debug(f"Ignoring unparsable calendar model: {calendar_model!r}")
        return None
