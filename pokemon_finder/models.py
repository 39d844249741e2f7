"""Pydantic models describing resolved Pokemon and saved favorites."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Stat(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    base_stat: int = Field(ge=0, le=255)


class Sprites(BaseModel):
    model_config = ConfigDict(frozen=True)

    front_default: Optional[str] = None
    official_artwork: Optional[str] = None

    @property
    def image_ref(self) -> Optional[str]:
        """Official artwork when available, otherwise the small front sprite."""
        return self.official_artwork or self.front_default


class Pokemon(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
    name: str = Field(min_length=1)
    types: List[str] = Field(min_length=1)
    stats: List[Stat] = Field(default_factory=list)
    abilities: List[str] = Field(default_factory=list)
    sprites: Sprites = Field(default_factory=Sprites)
    species: Dict[str, Any] = Field(default_factory=dict)


class FavoriteEntry(BaseModel):
    id: int = Field(ge=1)
    name: str
    sprite: Optional[str] = None
    types: List[str] = Field(default_factory=list)

    @classmethod
    def from_pokemon(cls, pokemon: Pokemon) -> "FavoriteEntry":
        return cls(
            id=pokemon.id,
            name=pokemon.name,
            sprite=pokemon.sprites.image_ref,
            types=list(pokemon.types),
        )
