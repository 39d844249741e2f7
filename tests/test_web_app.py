"""Tests for the Flask front end."""

import pytest

from pokemon_finder.clients import NetworkFailure
from pokemon_finder.config import Settings
from pokemon_finder.favorites import FavoritesStore, MemoryStorage
from pokemon_finder.web_app import create_app


@pytest.fixture
def favorites():
    return FavoritesStore(MemoryStorage())


@pytest.fixture
def app_client(resolver, client, favorites, tmp_path):
    client.fetch_pokemon.side_effect = NetworkFailure("offline")
    client.fetch_type_index.side_effect = NetworkFailure("offline")
    client.fetch_type.side_effect = NetworkFailure("offline")
    app = create_app(resolver=resolver, favorites=favorites, settings=Settings(favorites_path=tmp_path / "f.json"))
    app.config["TESTING"] = True
    return app.test_client()


def test_index_shows_featured_and_demo_notice(app_client):
    response = app_client.get("/")
    body = response.get_data(as_text=True)

    assert response.status_code == 200
    assert "demo data" in body
    for name in ["pikachu", "charizard", "mewtwo"]:
        assert name in body
    assert "Electric" in body


def test_search_renders_single_card(app_client):
    body = app_client.post("/", data={"action": "search", "query": "Blastoise"}).get_data(as_text=True)
    assert "#009" in body


def test_empty_search_reports_error(app_client):
    body = app_client.post("/", data={"action": "search", "query": "  "}).get_data(as_text=True)
    assert "must not be empty" in body


def test_type_filter(app_client):
    body = app_client.post("/", data={"action": "type", "type": "psychic"}).get_data(as_text=True)
    assert "mewtwo" in body
    assert "#151" in body


def test_toggle_favorite_uses_displayed_record(app_client, favorites):
    app_client.post("/", data={"action": "search", "query": "pikachu"})

    response = app_client.post("/favorites/25")

    assert response.status_code == 302
    assert favorites.ids() == [25]
    app_client.post("/favorites/25")
    assert favorites.ids() == []


def test_health_reports_online_state(app_client):
    assert app_client.get("/health").get_json() == {"status": "ok", "online": True}
    app_client.get("/")
    assert app_client.get("/health").get_json() == {"status": "ok", "online": False}


def test_card_image_falls_back_to_front_sprite(app_client):
    body = app_client.post("/", data={"action": "search", "query": "pikachu"}).get_data(as_text=True)
    assert "onerror='this.onerror=null; this.src=\"data:image/svg+xml;base64," in body


def test_only_displayed_records_can_be_favorited(app_client, favorites):
    app_client.post("/", data={"action": "search", "query": "pikachu"})
    app_client.post("/", data={"action": "search", "query": "mew"})

    app_client.post("/favorites/25")

    assert favorites.ids() == []
    app_client.post("/favorites/151")
    assert favorites.ids() == [151]
