"""Minimal Flask frontend for Pokemon Finder."""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dotenv import load_dotenv
from flask import Flask, redirect, render_template, request, url_for

from .clients import PokeAPIClient
from .config import Settings
from .constants import STAT_BAR_MAX
from .favorites import FavoritesStore, JsonFileStorage
from .models import Pokemon
from .resolver import PokemonResolver


@dataclass
class SessionView:
    """What the page currently shows. Newer results always replace older ones."""

    displayed: List[Pokemon] = field(default_factory=list)
    by_id: Dict[int, Pokemon] = field(default_factory=dict)
    type_names: List[str] = field(default_factory=list)
    selected_type: str = ""
    query: str = ""

    def show(self, pokemon_list: List[Pokemon]) -> None:
        self.displayed = list(pokemon_list)
        self.by_id = {pokemon.id: pokemon for pokemon in pokemon_list}


def _default_resolver(settings: Settings) -> PokemonResolver:
    return PokemonResolver(client=PokeAPIClient(base_url=settings.base_url, timeout=settings.timeout))


def create_app(
    resolver: Optional[PokemonResolver] = None,
    favorites: Optional[FavoritesStore] = None,
    settings: Optional[Settings] = None,
) -> Flask:
    settings = settings or Settings.from_env()
    resolver = resolver or _default_resolver(settings)
    favorites = favorites or FavoritesStore(JsonFileStorage(settings.favorites_path))
    view = SessionView()

    app = Flask(__name__)
    app.config["SECRET_KEY"] = os.getenv("FLASK_SECRET_KEY", "change-me")
    app.extensions["pokemon_finder"] = {"resolver": resolver, "favorites": favorites, "view": view}

    def _render(errors: List[str]):
        if not view.type_names:
            view.type_names = asyncio.run(resolver.load_type_names())
        return render_template(
            "index.html",
            pokemon_list=view.displayed,
            favorites=favorites.list(),
            favorite_ids=set(favorites.ids()),
            type_names=view.type_names,
            selected_type=view.selected_type,
            query=view.query,
            offline=not resolver.online,
            errors=errors,
            stat_bar_max=STAT_BAR_MAX,
        )

    @app.route("/", methods=["GET", "POST"])
    def index():  # type: ignore[override]
        errors: List[str] = []

        if request.method == "POST":
            action = request.form.get("action", "search")
            if action == "random":
                view.show([asyncio.run(resolver.resolve_random())])
            elif action == "type":
                view.selected_type = (request.form.get("type") or "").strip().lower()
                if view.selected_type:
                    view.show(asyncio.run(resolver.resolve_by_type(view.selected_type)))
            elif action == "clear":
                view.selected_type = ""
                view.query = ""
                view.show([])
            else:
                view.query = request.form.get("query", "")
                try:
                    view.show([asyncio.run(resolver.resolve_by_query(view.query))])
                except ValueError as exc:
                    errors.append(str(exc))
        elif not view.displayed:
            view.show(asyncio.run(resolver.load_featured()))

        return _render(errors)

    @app.route("/favorites/<int:pokemon_id>", methods=["POST"])
    def toggle_favorite(pokemon_id: int):
        favorites.toggle(pokemon_id, view.by_id.get(pokemon_id))
        return redirect(url_for("index"))

    @app.route("/health")
    def health():
        return {"status": "ok", "online": resolver.online}, 200

    return app


def main() -> None:
    load_dotenv()
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "4000")), debug=True)


if __name__ == "__main__":
    main()
