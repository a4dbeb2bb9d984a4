"""Shared-instance cache for Property objects."""

import logging
import threading
from typing import Optional

from wikibase_claims.exceptions import InvalidIdentifier
from wikibase_claims.models.identifiers import Property, normalize_property_id

logger = logging.getLogger(__name__)


class PropertyRegistry:
    """Deduplicates Property objects by identifier.

    Equal identifiers resolve to one shared instance for as long as the
    registry lives. Sharing is an optimization only: properties compare by
    value, so callers never depend on instance identity.
    """

    _shared: Optional["PropertyRegistry"] = None
    _shared_lock = threading.Lock()

    def __init__(self):
        self.properties: dict[str, Property] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @classmethod
    def shared(cls) -> "PropertyRegistry":
        """Process-wide registry."""
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            return cls._shared

    def resolve(self, property_id: str | int) -> Property:
        """Return the shared Property for ``property_id``.

        Accepts any casing of ``P<digits>`` and bare numeric ids. Raises
        InvalidIdentifier for anything else.
        """
        key = self._key(property_id)

        with self._lock:
            prop = self.properties.get(key)
            if prop is not None:
                self._hits += 1
                return prop
            self._misses += 1
            prop = Property(id=key)
            self.properties[key] = prop
            logger.debug(f"Registered property {key}")
            return prop

    @staticmethod
    def _key(property_id: str | int) -> str:
        raw = str(property_id).strip()
        if raw.isdigit():
            raw = f"P{raw}"
        return normalize_property_id(raw)

    def __contains__(self, property_id: str | int) -> bool:
        try:
            key = self._key(property_id)
        except InvalidIdentifier:
            return False
        with self._lock:
            return key in self.properties

    def __len__(self) -> int:
        with self._lock:
            return len(self.properties)

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "size": len(self.properties),
            }

    def clear(self):
        """Forget every registered property."""
        with self._lock:
            self.properties.clear()
            self._hits = 0
            self._misses = 0
