"""Favorites store: an ordered set of place names persisted as a JSON array."""

import json
import logging
from pathlib import Path

from weatherproxy.models.errors import InvalidInput

logger = logging.getLogger(__name__)


class FavoritesStore:
    """Ordered, duplicate-free list of place names backed by a JSON file.

    The file holds a plain JSON array of strings. Every change rewrites it.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._names: list[str] | None = None

    def load(self) -> list[str]:
        if not self.path.exists():
            self._names = []
            return []
        with open(self.path) as f:
            data = json.load(f)
        if not isinstance(data, list) or not all(isinstance(n, str) for n in data):
            raise ValueError(f"{self.path} does not hold a JSON array of strings")
        self._names = list(dict.fromkeys(data))
        return list(self._names)

    @property
    def names(self) -> list[str]:
        if self._names is None:
            self.load()
        return list(self._names)

    def add(self, name: str) -> list[str]:
        name = _clean(name)
        names = self.names
        if name not in names:
            names.append(name)
            self._save(names)
        return names

    def remove(self, name: str) -> list[str]:
        name = _clean(name)
        names = self.names
        if name in names:
            names.remove(name)
            self._save(names)
        return names

    def toggle(self, name: str) -> list[str]:
        """Remove `name` if present, else append it."""
        name = _clean(name)
        if name in self.names:
            return self.remove(name)
        return self.add(name)

    def _save(self, names: list[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(names, f)
        self._names = names
        logger.debug("Saved %d favorites to %s", len(names), self.path)


def _clean(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise InvalidInput("Favorite name required")
    return name
