"""Transforms PokeAPI payloads into Pokemon models."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .clients import MalformedPayload
from .models import Pokemon, Sprites, Stat


def species_url(payload: Dict[str, Any]) -> str:
    species = payload.get("species")
    url = species.get("url") if isinstance(species, dict) else None
    if not url:
        raise MalformedPayload("PokeAPI payload is missing the 'species.url' reference")
    return str(url)


def _nested_name(entry: Any, key: str) -> Optional[str]:
    if not isinstance(entry, dict):
        return None
    inner = entry.get(key)
    if not isinstance(inner, dict):
        return None
    name = inner.get("name")
    return str(name) if name else None


def _entries(payload: Dict[str, Any], key: str) -> List[Any]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedPayload(f"PokeAPI payload field '{key}' is not a list")
    return value


def _sprites(payload: Dict[str, Any]) -> Sprites:
    sprites = payload.get("sprites") or {}
    other = sprites.get("other") or {}
    artwork = other.get("official-artwork") or {}
    return Sprites(
        front_default=sprites.get("front_default"),
        official_artwork=artwork.get("front_default"),
    )


def pokemon_from_payload(payload: Dict[str, Any], species: Optional[Dict[str, Any]] = None) -> Pokemon:
    """Build a Pokemon from the /pokemon payload and its species document."""
    if "id" not in payload or "name" not in payload:
        raise MalformedPayload("PokeAPI payload is missing the 'id' or 'name' field")

    types = [name for name in (_nested_name(entry, "type") for entry in _entries(payload, "types")) if name]
    abilities = [
        name for name in (_nested_name(entry, "ability") for entry in _entries(payload, "abilities")) if name
    ]

    stats: List[Stat] = []
    for entry in _entries(payload, "stats"):
        name = _nested_name(entry, "stat")
        base_stat = entry.get("base_stat") if isinstance(entry, dict) else None
        if not name or base_stat is None:
            continue
        try:
            stats.append(Stat(name=name, base_stat=int(base_stat)))
        except (TypeError, ValueError) as exc:
            raise MalformedPayload(f"Stat '{name}' has an invalid base value: {base_stat!r}") from exc

    try:
        return Pokemon(
            id=payload["id"],
            name=payload["name"],
            types=types,
            stats=stats,
            abilities=abilities,
            sprites=_sprites(payload),
            species=dict(species or {}),
        )
    except (ValidationError, AttributeError) as exc:
        raise MalformedPayload(f"PokeAPI payload for '{payload.get('name')}' is invalid: {exc}") from exc


def type_member_names(payload: Dict[str, Any]) -> List[str]:
    members = payload.get("pokemon")
    if not isinstance(members, list):
        raise MalformedPayload("PokeAPI type payload is missing the 'pokemon' member list")
    return [name for name in (_nested_name(entry, "pokemon") for entry in members) if name]


def type_names(payload: Dict[str, Any]) -> List[str]:
    results = payload.get("results")
    if not isinstance(results, list):
        raise MalformedPayload("PokeAPI type index is missing the 'results' list")
    return [str(entry["name"]) for entry in results if isinstance(entry, dict) and entry.get("name")]
