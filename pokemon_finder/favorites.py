"""Favorites list persisted as a single JSON blob under one storage key."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from pydantic import TypeAdapter, ValidationError

from .constants import FAVORITES_STORAGE_KEY
from .models import FavoriteEntry, Pokemon

logger = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(List[FavoriteEntry])


class KeyValueStorage(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class JsonFileStorage:
    """Key/value strings kept in one JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path).expanduser()

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not contain a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError as exc:
            logger.warning("Overwriting unreadable storage file %s: %s", self.path, exc)
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


class FavoritesStore:
    """Ordered favorites, unique by Pokemon id.

    The stored list is read once on construction and written back whole after
    every change.
    """

    def __init__(self, storage: KeyValueStorage, key: str = FAVORITES_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key
        self._entries: List[FavoriteEntry] = self._load()

    def _load(self) -> List[FavoriteEntry]:
        try:
            raw = self.storage.get(self.key)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read favorites storage, starting empty: %s", exc)
            return []
        if not raw:
            return []
        try:
            entries = _ENTRIES.validate_json(raw)
        except ValidationError as exc:
            logger.warning("Ignoring unreadable favorites under '%s': %s", self.key, exc)
            return []

        unique: Dict[int, FavoriteEntry] = {}
        for entry in entries:
            unique.setdefault(entry.id, entry)
        return list(unique.values())

    def _save(self) -> None:
        self.storage.set(self.key, _ENTRIES.dump_json(self._entries).decode("utf-8"))

    def contains(self, pokemon_id: int) -> bool:
        return any(entry.id == pokemon_id for entry in self._entries)

    def ids(self) -> List[int]:
        return [entry.id for entry in self._entries]

    def list(self) -> List[FavoriteEntry]:
        return list(self._entries)

    def toggle(self, pokemon_id: int, snapshot: Optional[Pokemon] = None) -> bool:
        """Flip membership for ``pokemon_id`` and return whether it is now a favorite.

        Adding requires the currently shown Pokemon as ``snapshot``; a missing or
        mismatched snapshot leaves the list unchanged.
        """
        if self.contains(pokemon_id):
            self._entries = [entry for entry in self._entries if entry.id != pokemon_id]
        elif snapshot is not None and snapshot.id == pokemon_id:
            self._entries.append(FavoriteEntry.from_pokemon(snapshot))
        else:
            logger.warning("Cannot favorite Pokemon %s without its current record", pokemon_id)
        self._save()
        return self.contains(pokemon_id)
