from wikibase_claims.config import settings
from .registry import PropertyRegistry


def get_registry(registry: PropertyRegistry | None = None) -> PropertyRegistry:
    """Registry a decode call should use when the caller did not pass one."""
    if registry is not None:
        return registry
    if settings.share_property_registry:
        return PropertyRegistry.shared()
    return PropertyRegistry()


__all__ = ["PropertyRegistry", "get_registry"]
