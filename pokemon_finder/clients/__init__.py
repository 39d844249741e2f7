"""Client utilities for talking to PokeAPI."""

from .pokeapi import BadStatus, MalformedPayload, NetworkFailure, PokeAPIClient, PokeAPIError

__all__ = ["BadStatus", "MalformedPayload", "NetworkFailure", "PokeAPIClient", "PokeAPIError"]
