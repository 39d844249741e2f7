"""Static values shared by the resolver, the favorites store and the web app."""

from __future__ import annotations

POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
REQUEST_TIMEOUT_SECONDS = 10.0

# Highest national dex id PokeAPI serves reliably.
RANDOM_ID_MAX = 1010

TYPE_BATCH_LIMIT = 20

FAVORITES_STORAGE_KEY = "pokemonFavorites"

DEFAULT_TYPE_NAMES = [
    "normal",
    "fire",
    "water",
    "electric",
    "grass",
    "ice",
    "fighting",
    "poison",
    "ground",
    "flying",
    "psychic",
    "bug",
    "rock",
    "ghost",
    "dragon",
    "dark",
    "steel",
    "fairy",
]

FEATURED_POKEMON = ["pikachu", "charizard", "blastoise", "venusaur", "mewtwo", "mew"]

# Base stats above this value fill the whole bar in the web view.
STAT_BAR_MAX = 200
