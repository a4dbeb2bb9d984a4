import logging
import os

import pytest

from wikibase_claims.config import settings
from wikibase_claims.property_registry import PropertyRegistry
from wikibase_claims.tree import parse_xml


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Configure logging for all test sessions"""
    log_level_str = os.getenv("TEST_LOG_LEVEL", settings.log_level)
    log_level = logging.DEBUG if log_level_str == "DEBUG" else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )


@pytest.fixture
def registry() -> PropertyRegistry:
    """Fresh registry so tests do not share property instances"""
    return PropertyRegistry()


@pytest.fixture
def snak_xml():
    """Build a snak node shaped like the API's XML output"""

    def build(datatype: str, datavalue: str, property_id: str = "P1", tag: str = "mainsnak"):
        return parse_xml(
            f'<{tag} snaktype="value" property="{property_id}" datatype="{datatype}">'
            f"{datavalue}"
            f"</{tag}>"
        )

    return build


@pytest.fixture
def time_xml(snak_xml):
    """Build a time snak node from a time string and a precision"""

    def build(time: str, precision: int, extra: str = ""):
        attributes = (
            f'time="{time}" timezone="0" before="0" after="0" precision="{precision}" '
            f'calendarmodel="http://www.wikidata.org/entity/Q1985727" {extra}'
        )
        return snak_xml("time", f'<datavalue type="time"><value {attributes}/></datavalue>', "P585")

    return build
