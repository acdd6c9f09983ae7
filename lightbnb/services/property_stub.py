import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


class InMemoryPropertyStore:
    """
    Placeholder property store kept for tests and demos.

    Records live in a process-local dict keyed by id and are never written to
    the database. Not safe for concurrent writers.
    """

    def __init__(self, properties: dict[int, dict] | None = None):
        self.properties: dict[int, dict] = dict(properties or {})

    @classmethod
    def from_json(cls, path: str) -> "InMemoryPropertyStore":
        """Load a JSON object of ``{"<id>": {...property...}}``."""
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        store = cls({int(key): value for key, value in raw.items()})
        logger.info("Loaded %d placeholder properties from %s", len(store), path)
        return store

    def __len__(self) -> int:
        return len(self.properties)

    def get(self, property_id: int) -> dict | None:
        return self.properties.get(property_id)

    def add(self, prop: dict[str, Any]) -> dict[str, Any]:
        # Ids are count + 1, so they collide once anything is removed
        property_id = len(self.properties) + 1
        prop["id"] = property_id
        self.properties[property_id] = prop
        return prop
