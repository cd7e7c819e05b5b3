from __future__ import annotations

import random
from datetime import date

import pytest

from donkdle.catalog import CatalogError, LocationCatalog, parse_catalog
from donkdle.models import ChannelStatus
from donkdle.selection import GameMode, daily_index, daily_seed, select_target
from donkdle.session import GameSession, GameState, GuessRejection


class RecordingTelemetry:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []

    def emit(self, event_name: str, payload: dict) -> None:
        self.events.append((event_name, payload))


def _catalog() -> LocationCatalog:
    return parse_catalog(
        [
            {"id": 1, "name": "Hillside Banana", "hint_region": "Hillside", "level": "Japes", "kong": "Donkey", "moves": ["Strong Kong"]},
            {"id": 2, "name": "Lowlands Crate", "hint_region": "Lowlands", "level": "Japes", "kong": "Any", "moves": []},
            {"id": 3, "name": "Igloo Maze", "hint_region": "Igloo", "level": "Caves", "kong": "Tiny", "moves": ["Saxophone Slam", "Mini Monkey"]},
        ]
    )


def _session(target_id: str = "1", **kwargs) -> tuple[GameSession, RecordingTelemetry]:
    catalog = _catalog()
    telemetry = RecordingTelemetry()
    state = GameState(target=catalog.get(target_id))
    return GameSession(catalog=catalog, state=state, telemetry=telemetry, **kwargs), telemetry


def test_wrong_guess_is_recorded_and_game_continues() -> None:
    session, telemetry = _session()

    outcome = session.submit("lowlands crate")

    assert outcome.accepted
    assert outcome.record.feedback.region.status == ChannelStatus.PRESENT
    assert outcome.message == "1 guess made. Keep trying!"
    assert len(session.state.guesses) == 1
    assert session.state.game_over is False
    assert [name for name, _ in telemetry.events] == ["guess_accepted"]


def test_correct_guess_wins_and_ends_game() -> None:
    session, telemetry = _session()
    session.submit("Igloo Maze")

    outcome = session.submit("Hillside Banana")

    assert outcome.accepted
    assert session.state.game_won is True
    assert session.state.game_over is True
    assert "2 guesses" in outcome.message
    assert telemetry.events[-1] == ("game_over", {"won": True, "guess_count": 2, "mode": "daily"})


@pytest.mark.parametrize(
    ("guess", "rejection"),
    [
        ("", GuessRejection.EMPTY),
        ("   ", GuessRejection.EMPTY),
        ("Nowhere", GuessRejection.NOT_FOUND),
    ],
)
def test_invalid_guesses_leave_state_unchanged(guess: str, rejection: GuessRejection) -> None:
    session, telemetry = _session()

    outcome = session.submit(guess)

    assert not outcome.accepted
    assert outcome.rejection == rejection
    assert session.state.guesses == []
    assert telemetry.events == []


def test_duplicate_guess_is_rejected() -> None:
    session, _ = _session()
    session.submit("Igloo Maze")

    outcome = session.submit("IGLOO MAZE")

    assert outcome.rejection == GuessRejection.DUPLICATE
    assert outcome.message == "You already guessed this location!"
    assert len(session.state.guesses) == 1


def test_guesses_after_game_over_are_rejected() -> None:
    session, _ = _session()
    session.submit("Hillside Banana")

    outcome = session.submit("Igloo Maze")

    assert outcome.rejection == GuessRejection.GAME_OVER
    assert len(session.state.guesses) == 1


def test_max_guesses_ends_game_as_loss() -> None:
    session, _ = _session(max_guesses=2)
    session.submit("Igloo Maze")

    outcome = session.submit("Lowlands Crate")

    assert outcome.accepted
    assert session.state.game_over is True
    assert session.state.game_won is False


def test_daily_selection_is_stable_per_day() -> None:
    catalog = _catalog()
    day = date(2024, 3, 9)

    assert daily_seed(day) == 20240309
    assert daily_index(day, 42) == 11
    assert daily_index(date(2024, 3, 10), 42) == 33
    index = daily_index(day, len(catalog))
    assert 0 <= index < len(catalog)
    assert select_target(catalog, GameMode.DAILY, day=day) == catalog[index]
    assert select_target(catalog, GameMode.DAILY, day=day) == select_target(catalog, GameMode.DAILY, day=day)


def test_random_selection_uses_rng() -> None:
    catalog = _catalog()
    expected = random.Random(7).choice(catalog.locations)
    assert select_target(catalog, GameMode.RANDOM, rng=random.Random(7)) == expected


def test_empty_catalog_cannot_select_target() -> None:
    with pytest.raises(CatalogError):
        select_target(LocationCatalog([]), GameMode.DAILY, day=date(2024, 1, 1))
