"""Runtime settings read from the environment (optionally via a .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .constants import POKEAPI_BASE_URL, REQUEST_TIMEOUT_SECONDS

DEFAULT_FAVORITES_PATH = Path("~/.pokemon_finder/favorites.json")


@dataclass
class Settings:
    base_url: str = POKEAPI_BASE_URL
    timeout: float = REQUEST_TIMEOUT_SECONDS
    favorites_path: Path = DEFAULT_FAVORITES_PATH

    @classmethod
    def from_env(cls) -> "Settings":
        timeout_raw = os.getenv("POKEAPI_TIMEOUT", "").strip()
        try:
            timeout = float(timeout_raw) if timeout_raw else REQUEST_TIMEOUT_SECONDS
        except ValueError:
            timeout = REQUEST_TIMEOUT_SECONDS
        return cls(
            base_url=os.getenv("POKEAPI_BASE_URL") or POKEAPI_BASE_URL,
            timeout=timeout,
            favorites_path=Path(os.getenv("POKEMON_FAVORITES_PATH") or DEFAULT_FAVORITES_PATH).expanduser(),
        )
