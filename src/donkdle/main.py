"""CLI entrypoint for Donkdle."""

from __future__ import annotations

import typer
from rich import print

from donkdle.catalog import CatalogError, load_catalog
from donkdle.config import settings
from donkdle.game import DonkdleGame
from donkdle.presentation import render_answer, render_board, render_search_hits, render_stats
from donkdle.selection import GameMode
from donkdle.storage import JsonFileKeyValueStore, ProgressStore
from donkdle.telemetry import LoggingTelemetry, configure_logging

app = typer.Typer(help="Donkdle: guess the daily location")

_QUIT = ":q"
_SEARCH_PREFIX = "?"


@app.callback()
def main() -> None:
    configure_logging(settings.log_level)


def _parse_mode(mode: str | None) -> GameMode:
    try:
        return GameMode((mode or settings.default_mode).lower())
    except ValueError:
        raise typer.BadParameter(f"Unknown mode {mode!r}; use daily or random")


def _build_game(mode: GameMode = GameMode.DAILY) -> DonkdleGame:
    try:
        catalog = load_catalog(settings.catalog_path)
    except CatalogError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)

    progress = ProgressStore(JsonFileKeyValueStore(settings.state_path))
    return DonkdleGame(
        catalog,
        progress,
        mode=mode,
        max_guesses=settings.max_guesses,
        telemetry=LoggingTelemetry(),
    )


def _show_search(game: DonkdleGame, query: str) -> None:
    hits = game.search(query, limit=settings.autocomplete_limit, min_length=settings.min_query_length)
    if not hits:
        print({"search": query, "matches": 0})
        return
    print(render_search_hits(hits))


def _show_game_over(game: DonkdleGame) -> None:
    state = game.state
    print(
        render_answer(
            state.target,
            won=state.game_won,
            guess_count=len(state.guesses),
            daily=game.mode is GameMode.DAILY,
        )
    )
    if game.mode is GameMode.DAILY:
        print(render_stats(game.stats()))
    print(game.share_text())


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "catalog_path": settings.catalog_path or "bundled",
            "state_path": settings.state_path,
            "default_mode": settings.default_mode,
            "max_guesses": settings.max_guesses,
        }
    )


@app.command()
def play(mode: str = typer.Option(None, help="daily or random")) -> None:
    """Play interactively: type a location name, '?query' to search, ':q' to quit."""
    game = _build_game(_parse_mode(mode))
    print(render_board(game.state.guesses, game_over=game.state.game_over))
    if game.state.game_over:
        _show_game_over(game)
        return

    print({"hint": f"Enter a location name, '{_SEARCH_PREFIX}text' to search, '{_QUIT}' to quit."})
    while not game.state.game_over:
        try:
            line = input("Guess: ").strip()
        except EOFError:
            break

        if line == _QUIT:
            break
        if line.startswith(_SEARCH_PREFIX):
            _show_search(game, line[len(_SEARCH_PREFIX):].strip())
            continue

        outcome = game.guess(line)
        if not outcome.accepted:
            print({"error": outcome.message})
            continue

        print(render_board(game.state.guesses, game_over=game.state.game_over))
        print(outcome.message)

    if game.state.game_over:
        _show_game_over(game)


@app.command()
def guess(name: str) -> None:
    """Submit one guess to today's daily game."""
    game = _build_game(GameMode.DAILY)
    outcome = game.guess(name)
    if not outcome.accepted:
        print({"error": outcome.message})
        raise typer.Exit(code=1)

    print(render_board(game.state.guesses, game_over=game.state.game_over))
    print(outcome.message)
    if game.state.game_over:
        _show_game_over(game)


@app.command()
def search(query: str) -> None:
    """List locations matching a partial name."""
    _show_search(_build_game(), query)


@app.command()
def stats() -> None:
    """Show daily game statistics."""
    print(render_stats(_build_game().stats()))


@app.command()
def share() -> None:
    """Print the share text for today's finished game."""
    text = _build_game(GameMode.DAILY).share_text()
    if text is None:
        print({"error": "Today's game is not finished yet."})
        raise typer.Exit(code=1)
    print(text)


if __name__ == "__main__":
    app()
