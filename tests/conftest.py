"""Shared fixtures for Pokemon Finder tests."""

import random
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

# Make the package importable without installing it
root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

from pokemon_finder.clients import PokeAPIClient
from pokemon_finder.demo_data import DemoDataset
from pokemon_finder.resolver import PokemonResolver


def pokemon_payload(pokemon_id: int, name: str, types: Optional[List[str]] = None) -> Dict[str, Any]:
    """A trimmed /pokemon response in PokeAPI's shape."""
    return {
        "id": pokemon_id,
        "name": name,
        "types": [{"slot": i + 1, "type": {"name": t}} for i, t in enumerate(types or ["normal"])],
        "stats": [
            {"base_stat": 45, "stat": {"name": "hp"}},
            {"base_stat": 49, "stat": {"name": "attack"}},
        ],
        "abilities": [{"ability": {"name": "overgrow"}}],
        "sprites": {
            "front_default": f"https://img.example/{pokemon_id}.png",
            "other": {"official-artwork": {"front_default": f"https://art.example/{pokemon_id}.png"}},
        },
        "species": {"name": name, "url": f"https://pokeapi.co/api/v2/pokemon-species/{pokemon_id}/"},
    }


@pytest.fixture
def make_payload():
    return pokemon_payload


@pytest.fixture
def dataset() -> DemoDataset:
    return DemoDataset.from_json(rng=random.Random(7))


@pytest.fixture
def client() -> MagicMock:
    return MagicMock(spec=PokeAPIClient)


@pytest.fixture
def resolver(client, dataset) -> PokemonResolver:
    return PokemonResolver(client=client, dataset=dataset, rng=random.Random(11))
