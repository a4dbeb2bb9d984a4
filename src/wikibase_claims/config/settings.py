import logging

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    entity_uri_prefix: str = "http://www.wikidata.org/entity/"
    default_globe: str = "Q2"
    default_calendar_model: str = "http://www.wikidata.org/entity/Q1985727"
    share_property_registry: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "WIKIBASE_CLAIMS_"

    def entity_uri(self, entity_id: str) -> str:
        return f"{self.entity_uri_prefix}{entity_id}"

    def default_globe_uri(self) -> str:
        return self.entity_uri(self.default_globe)


# noinspection PyArgumentList
settings = Settings()

logger.debug("=== Settings Debug ===")
logger.debug(f"Entity URI prefix: {settings.entity_uri_prefix}")
logger.debug(f"Default globe: {settings.default_globe}")
logger.debug(f"Default calendar model: {settings.default_calendar_model}")
logger.debug(f"Share property registry: {settings.share_property_registry}")
logger.debug("=== End Settings Debug ===")
