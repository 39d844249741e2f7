"""Public package exports for Pokemon Finder."""

from .availability import AvailabilityState
from .clients import BadStatus, MalformedPayload, NetworkFailure, PokeAPIClient, PokeAPIError
from .config import Settings
from .constants import DEFAULT_TYPE_NAMES, FAVORITES_STORAGE_KEY, RANDOM_ID_MAX, TYPE_BATCH_LIMIT
from .demo_data import DemoDataset
from .favorites import FavoritesStore, JsonFileStorage, MemoryStorage
from .models import FavoriteEntry, Pokemon, Sprites, Stat
from .resolver import PokemonResolver

__all__ = [
    "AvailabilityState",
    "BadStatus",
    "MalformedPayload",
    "NetworkFailure",
    "PokeAPIClient",
    "PokeAPIError",
    "Settings",
    "DEFAULT_TYPE_NAMES",
    "FAVORITES_STORAGE_KEY",
    "RANDOM_ID_MAX",
    "TYPE_BATCH_LIMIT",
    "DemoDataset",
    "FavoritesStore",
    "JsonFileStorage",
    "MemoryStorage",
    "FavoriteEntry",
    "Pokemon",
    "Sprites",
    "Stat",
    "PokemonResolver",
]
