import pytest

from wikibase_claims.exceptions import MalformedValue
from wikibase_claims.models import Era, TimePrecision
from wikibase_claims.parsers import parse_snak
from wikibase_claims.tree import parse_xml


def test_year_precision_ignores_month_and_day(time_xml, registry):
    """Test that month/day digits are ignored below month precision"""
    value = parse_snak(time_xml("+1969-07-20T00:00:00Z", 9), registry).value

    assert value.kind == "time"
    assert value.year == 1969
    assert value.precision == TimePrecision.YEAR
    assert value.month is None
    assert value.day is None
    assert value.hour is None


def test_year_precision_same_value_regardless_of_embedded_date(time_xml, registry):
    """Test year precision same value regardless of embedded date"""
    with_date = parse_snak(time_xml("+1969-07-20T00:00:00Z", 9), registry).value
    without_date = parse_snak(time_xml("+1969-00-00T00:00:00Z", 9), registry).value

    assert with_date == without_date


def test_coarse_precision_keeps_large_signed_year(time_xml, registry):
    """Test coarse precision keeps large signed year"""
    value = parse_snak(time_xml("-13798000000-00-00T00:00:00Z", 3), registry).value

    assert value.year == -13798000000
    assert value.era == Era.BCE
    assert value.precision == TimePrecision.MILLION_YEARS


def test_month_precision_uses_placeholder_day_and_time(time_xml, registry):
    """Test that day and time are fixed to the first of the month at midnight"""
    value = parse_snak(time_xml("+2014-05-17T13:14:15Z", 10), registry).value

    assert value.year == 2014
    assert value.month == 5
    assert value.day == 1
    assert (value.hour, value.minute, value.second) == (0, 0, 0)


def test_month_precision_with_zero_day(time_xml, registry):
    """Test month precision with zero day"""
    value = parse_snak(time_xml("+2014-05-00T00:00:00Z", 10), registry).value

    assert value.month == 5
    assert value.day == 1


def test_day_precision_full_date_time(time_xml, registry):
    """Test day precision full date time"""
    value = parse_snak(time_xml("+2023-12-31T10:20:30Z", 11), registry).value

    assert value.year == 2023
    assert value.month == 12
    assert value.day == 31
    assert (value.hour, value.minute, value.second) == (10, 20, 30)
    assert value.era == Era.CE


def test_day_precision_bce_date(time_xml, registry):
    """Test that a leading '-' marks BCE without shifting the year"""
    value = parse_snak(time_xml("-0044-03-15T00:00:00Z", 11), registry).value

    assert value.era == Era.BCE
    assert value.year_of_era == 44
    assert value.year == -44
    assert value.month == 3
    assert value.day == 15


def test_tolerances_and_calendar_model(registry):
    """Test tolerances and calendar model"""
    node = parse_xml(
        '<mainsnak snaktype="value" property="P569" datatype="time">'
        '<datavalue type="time"><value time="+1952-03-11T00:00:00Z" timezone="60" before="2" after="3" '
        'precision="11" calendarmodel="http://www.wikidata.org/entity/Q1985786"/></datavalue>'
        "</mainsnak>"
    )

    value = parse_snak(node, registry).value
    assert value.before == 2
    assert value.after == 3
    assert value.timezone == 60
    assert value.calendar_model == "http://www.wikidata.org/entity/Q1985786"


def test_calendar_model_is_not_read_from_before(registry):
    """Test that a missing calendarmodel leaves the field unset"""
    node = parse_xml(
        '<mainsnak snaktype="value" property="P569" datatype="time">'
        '<datavalue type="time"><value time="+1952-03-11T00:00:00Z" before="0" after="0" precision="11"/>'
        "</datavalue></mainsnak>"
    )

    value = parse_snak(node, registry).value
    assert value.calendar_model is None
    assert value.timezone == 0


def test_unparsable_calendar_model_is_tolerated(registry):
    """Test unparsable calendar model is tolerated"""
    node = parse_xml(
        '<mainsnak snaktype="value" property="P569" datatype="time">'
        '<datavalue type="time"><value time="+1952-03-11T00:00:00Z" before="0" after="0" precision="11" '
        'calendarmodel="gregorian"/></datavalue></mainsnak>'
    )

    assert parse_snak(node, registry).value.calendar_model is None


def test_missing_precision_is_malformed(registry):
    """Test missing precision is malformed"""
    node = parse_xml(
        '<mainsnak snaktype="value" property="P569" datatype="time">'
        '<datavalue type="time"><value time="+1952-03-11T00:00:00Z"/></datavalue></mainsnak>'
    )

    with pytest.raises(MalformedValue):
        parse_snak(node, registry)


def test_unparsable_tolerance_is_malformed(registry):
    """Test unparsable tolerance is malformed"""
    node = parse_xml(
        '<mainsnak snaktype="value" property="P569" datatype="time">'
        '<datavalue type="time"><value time="+1952-03-11T00:00:00Z" precision="11" before="soon"/>'
        "</datavalue></mainsnak>"
    )

    with pytest.raises(MalformedValue):
        parse_snak(node, registry)


@pytest.mark.parametrize(
    "time,precision",
    [
        ("yesterday", 9),
        ("+2014", 10),
        ("+2014-05", 11),
        ("+2014-13-01T00:00:00Z", 11),
    ],
)
def test_unparsable_time_is_malformed(time_xml, registry, time, precision):
    """Test unparsable time is malformed"""
    with pytest.raises(MalformedValue):
        parse_snak(time_xml(time, precision), registry)


def test_precision_out_of_range_is_malformed(time_xml, registry):
    """Test precision out of range is malformed"""
    with pytest.raises(MalformedValue):
        parse_snak(time_xml("+2014-05-01T00:00:00Z", 15), registry)


@pytest.mark.parametrize(
    "time",
    ["+2023-02-31T00:00:00Z", "+2023-04-31T00:00:00Z", "+2023-02-29T00:00:00Z", "+1900-02-29T00:00:00Z"],
)
def test_day_that_does_not_exist_is_malformed(time_xml, registry, time):
    """Test that impossible calendar dates are rejected"""
    with pytest.raises(MalformedValue):
        parse_snak(time_xml(time, 11), registry)


def test_leap_day_is_accepted(time_xml, registry):
    """Test that February 29th parses in a Gregorian leap year"""
    value = parse_snak(time_xml("+2024-02-29T00:00:00Z", 11), registry).value

    assert (value.month, value.day) == (2, 29)


def test_julian_century_leap_day_is_accepted(registry):
    """Test that every fourth year is a leap year in the Julian calendar"""
    node = parse_xml(
        '<mainsnak snaktype="value" property="P569" datatype="time">'
        '<datavalue type="time"><value time="+1700-02-29T00:00:00Z" precision="11" '
        'calendarmodel="http://www.wikidata.org/entity/Q1985786"/></datavalue></mainsnak>'
    )

    value = parse_snak(node, registry).value
    assert (value.year, value.month, value.day) == (1700, 2, 29)
