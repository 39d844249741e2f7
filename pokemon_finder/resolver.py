"""Resolves Pokemon lookups against PokeAPI, falling back to the demo dataset.

Callers never learn which source answered. The first PokeAPI failure of any
kind (unreachable host, non-success status, unusable body) switches the
resolver to offline mode for the rest of the session, and every later lookup
is answered from :class:`~pokemon_finder.demo_data.DemoDataset` without
touching the network.
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import List, Optional

from .api_adapter import pokemon_from_payload, species_url, type_member_names, type_names
from .availability import AvailabilityState
from .clients import PokeAPIClient, PokeAPIError
from .constants import DEFAULT_TYPE_NAMES, FEATURED_POKEMON, RANDOM_ID_MAX, TYPE_BATCH_LIMIT
from .demo_data import DemoDataset
from .models import Pokemon

logger = logging.getLogger(__name__)


def normalize_query(query: str) -> str:
    token = str(query).strip().lower()
    if not token:
        raise ValueError("Search query must not be empty")
    return token


class PokemonResolver:
    def __init__(
        self,
        client: Optional[PokeAPIClient] = None,
        dataset: Optional[DemoDataset] = None,
        availability: Optional[AvailabilityState] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.client = client or PokeAPIClient()
        self.dataset = dataset or DemoDataset.from_json()
        self.availability = availability or AvailabilityState()
        self._rng = rng or random.Random()

    @property
    def online(self) -> bool:
        return self.availability.online

    def _go_offline(self, error: PokeAPIError, context: str) -> None:
        logger.warning("PokeAPI error while %s, switching to demo data: %s", context, error)
        self.availability.mark_unavailable(error)

    async def resolve_by_query(self, query: str) -> Pokemon:
        token = normalize_query(query)
        if not self.availability.online:
            return self.dataset.lookup(token)

        try:
            payload = await asyncio.to_thread(self.client.fetch_pokemon, token)
            species = await asyncio.to_thread(self.client.fetch_species, species_url(payload))
            return pokemon_from_payload(payload, species)
        except PokeAPIError as error:
            self._go_offline(error, f"resolving '{token}'")
            return self.dataset.lookup(token)

    async def resolve_random(self) -> Pokemon:
        pokemon_id = self._rng.randint(1, RANDOM_ID_MAX)
        return await self.resolve_by_query(str(pokemon_id))

    async def resolve_many(self, queries: List[str]) -> List[Pokemon]:
        """Resolve every query concurrently; results keep the input order."""
        return list(await asyncio.gather(*(self.resolve_by_query(query) for query in queries)))

    async def resolve_by_type(self, type_name: str) -> List[Pokemon]:
        token = normalize_query(type_name)
        if not self.availability.online:
            return self.dataset.by_type(token)

        try:
            payload = await asyncio.to_thread(self.client.fetch_type, token)
            members = type_member_names(payload)
        except PokeAPIError as error:
            self._go_offline(error, f"listing type '{token}'")
            return self.dataset.by_type(token)

        return await self.resolve_many(members[:TYPE_BATCH_LIMIT])

    async def load_type_names(self) -> List[str]:
        if self.availability.online:
            try:
                payload = await asyncio.to_thread(self.client.fetch_type_index)
                return type_names(payload)
            except PokeAPIError as error:
                self._go_offline(error, "loading type names")
        return list(DEFAULT_TYPE_NAMES)

    async def load_featured(self) -> List[Pokemon]:
        return await self.resolve_many(FEATURED_POKEMON)
