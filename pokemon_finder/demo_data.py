"""Bundled demo Pokemon served while PokeAPI is unreachable."""

from __future__ import annotations

import json
import random
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional

from .models import Pokemon

DEFAULT_DATA_PATH = Path(__file__).resolve().parent / "data" / "demo_pokemon.json"


class DemoDataset:
    """Read-only lookup table over a fixed set of Pokemon.

    Records are indexed twice, by lower-cased name and by id, when the dataset
    is built. Neither index changes afterwards.
    """

    def __init__(self, records: Iterable[Pokemon], rng: Optional[random.Random] = None) -> None:
        by_name = {}
        by_id = {}
        for record in records:
            name = record.name.lower()
            if name in by_name:
                raise ValueError(f"Duplicate demo Pokemon name '{record.name}'")
            if str(record.id) in by_id:
                raise ValueError(f"Duplicate demo Pokemon id {record.id}")
            by_name[name] = record
            by_id[str(record.id)] = record

        if not by_name:
            raise ValueError("Demo dataset must contain at least one Pokemon")

        self._by_name = MappingProxyType(by_name)
        self._by_id = MappingProxyType(by_id)
        self._ordered = tuple(by_name.values())
        self._rng = rng or random.Random()

    @classmethod
    def from_json(cls, data_path: Optional[Path] = None, rng: Optional[random.Random] = None) -> "DemoDataset":
        path = Path(data_path) if data_path is not None else DEFAULT_DATA_PATH
        with path.open("r", encoding="utf-8") as source:
            payload = json.load(source)
        return cls((Pokemon.model_validate(entry) for entry in payload), rng=rng)

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[Pokemon]:
        return iter(self._ordered)

    @property
    def names(self) -> List[str]:
        return list(self._by_name)

    def find(self, query: str) -> Optional[Pokemon]:
        token = str(query).strip().lower()
        record = self._by_name.get(token)
        if record is not None:
            return record
        return self._by_id.get(token)

    def lookup(self, query: str) -> Pokemon:
        """Return the matching record, or a random one when nothing matches.

        A result is therefore not proof that the queried Pokemon exists.
        """
        record = self.find(query)
        if record is None:
            record = self._rng.choice(self._ordered)
        return record

    def by_type(self, type_name: str) -> List[Pokemon]:
        wanted = type_name.strip().lower()
        return [record for record in self._ordered if wanted in record.types]
