"""Thin PokeAPI client built on a shared requests session."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from ..constants import POKEAPI_BASE_URL, REQUEST_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class PokeAPIError(RuntimeError):
    """Base class for anything that prevents a usable PokeAPI answer."""


class NetworkFailure(PokeAPIError):
    """The host could not be reached or did not answer in time."""


class BadStatus(PokeAPIError):
    """PokeAPI answered with a non-success HTTP status."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"PokeAPI request to {url} failed with status {status_code}")
        self.status_code = status_code
        self.url = url


class MalformedPayload(PokeAPIError):
    """The response body is not JSON or lacks fields we depend on."""


class PokeAPIClient:
    """Blocking wrapper around the handful of PokeAPI endpoints we use."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or POKEAPI_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_pokemon(self, query: str) -> Dict[str, Any]:
        if not query:
            raise ValueError("query is required")
        return self._get_json(f"{self.base_url}/pokemon/{quote(query, safe='')}")

    def fetch_species(self, url: str) -> Dict[str, Any]:
        return self._get_json(url)

    def fetch_type(self, type_name: str) -> Dict[str, Any]:
        if not type_name:
            raise ValueError("type_name is required")
        return self._get_json(f"{self.base_url}/type/{quote(type_name, safe='')}")

    def fetch_type_index(self) -> Dict[str, Any]:
        return self._get_json(f"{self.base_url}/type")

    def _get_json(self, url: str) -> Dict[str, Any]:
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, headers={"Accept": "application/json"}, timeout=self.timeout)
        except requests.RequestException as exc:
            raise NetworkFailure(f"Could not reach PokeAPI at {url}: {exc}") from exc

        if not response.ok:
            raise BadStatus(response.status_code, url)

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedPayload(f"PokeAPI returned a non-JSON body for {url}") from exc

        if not isinstance(payload, dict):
            raise MalformedPayload(f"PokeAPI returned {type(payload).__name__} instead of an object for {url}")
        return payload
