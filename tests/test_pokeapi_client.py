"""Tests for PokeAPIClient error mapping."""

from unittest.mock import MagicMock

import pytest
import requests

from pokemon_finder.clients import BadStatus, MalformedPayload, NetworkFailure, PokeAPIClient


def _response(status_code=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


class TestPokeAPIClient:
    def test_fetch_pokemon_builds_url(self, session):
        session.get.return_value = _response(payload={"id": 25, "name": "pikachu"})
        client = PokeAPIClient(base_url="https://example.test/api/", session=session, timeout=3)

        assert client.fetch_pokemon("pikachu") == {"id": 25, "name": "pikachu"}
        args, kwargs = session.get.call_args
        assert args[0] == "https://example.test/api/pokemon/pikachu"
        assert kwargs["timeout"] == 3

    def test_fetch_type_and_index_urls(self, session):
        session.get.return_value = _response(payload={"results": []})
        client = PokeAPIClient(session=session)

        client.fetch_type("fire")
        assert session.get.call_args[0][0] == "https://pokeapi.co/api/v2/type/fire"
        client.fetch_type_index()
        assert session.get.call_args[0][0] == "https://pokeapi.co/api/v2/type"

    def test_connection_error_is_network_failure(self, session):
        session.get.side_effect = requests.ConnectionError("no route")
        with pytest.raises(NetworkFailure):
            PokeAPIClient(session=session).fetch_pokemon("mew")

    def test_timeout_is_network_failure(self, session):
        session.get.side_effect = requests.Timeout("slow")
        with pytest.raises(NetworkFailure):
            PokeAPIClient(session=session).fetch_species("https://pokeapi.co/api/v2/pokemon-species/151/")

    def test_not_found_is_bad_status(self, session):
        session.get.return_value = _response(status_code=404)
        with pytest.raises(BadStatus) as exc_info:
            PokeAPIClient(session=session).fetch_pokemon("missingno")
        assert exc_info.value.status_code == 404

    def test_non_json_body_is_malformed(self, session):
        session.get.return_value = _response(json_error=ValueError("Expecting value"))
        with pytest.raises(MalformedPayload):
            PokeAPIClient(session=session).fetch_pokemon("mew")

    def test_non_object_body_is_malformed(self, session):
        session.get.return_value = _response(payload=["mew"])
        with pytest.raises(MalformedPayload):
            PokeAPIClient(session=session).fetch_pokemon("mew")

    def test_empty_query_rejected(self, session):
        with pytest.raises(ValueError):
            PokeAPIClient(session=session).fetch_pokemon("")
        session.get.assert_not_called()
