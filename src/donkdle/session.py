"""Session state and guess handling for a single game."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from donkdle.catalog import LocationCatalog
from donkdle.evaluator import evaluate
from donkdle.models import GuessRecord, Location
from donkdle.selection import GameMode
from donkdle.telemetry import NullTelemetry, Telemetry


class GuessRejection(str, Enum):
    GAME_OVER = "game_over"
    EMPTY = "empty"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"


_REJECTION_MESSAGES: dict[GuessRejection, str] = {
    GuessRejection.GAME_OVER: "The game is already over.",
    GuessRejection.EMPTY: "Please enter a location name",
    GuessRejection.NOT_FOUND: "Location not found. Please select from the list.",
    GuessRejection.DUPLICATE: "You already guessed this location!",
}


@dataclass(slots=True)
class GameState:
    target: Location
    mode: GameMode = GameMode.DAILY
    guesses: list[GuessRecord] = field(default_factory=list)
    game_over: bool = False
    game_won: bool = False

    def has_guessed(self, location: Location) -> bool:
        return any(record.location.id == location.id for record in self.guesses)


@dataclass(slots=True)
class GuessOutcome:
    record: GuessRecord | None = None
    rejection: GuessRejection | None = None
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.record is not None


class GameSession:
    """Applies player guesses to a ``GameState``; the only place that state is mutated."""

    def __init__(
        self,
        *,
        catalog: LocationCatalog,
        state: GameState,
        max_guesses: int | None = None,
        telemetry: Telemetry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._catalog = catalog
        self._state = state
        self._max_guesses = max_guesses
        self._telemetry = telemetry or NullTelemetry()
        self._logger = logger or logging.getLogger("donkdle.session")

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def max_guesses(self) -> int | None:
        return self._max_guesses

    def submit(self, raw_name: str) -> GuessOutcome:
        if self._state.game_over:
            return self._reject(GuessRejection.GAME_OVER, raw_name)

        name = (raw_name or "").strip()
        if not name:
            return self._reject(GuessRejection.EMPTY, raw_name)

        location = self._catalog.find_by_name(name)
        if location is None:
            return self._reject(GuessRejection.NOT_FOUND, raw_name)

        if self._state.has_guessed(location):
            return self._reject(GuessRejection.DUPLICATE, raw_name)

        record = GuessRecord(location=location, feedback=evaluate(location, self._state.target))
        self._state.guesses.append(record)
        guess_count = len(self._state.guesses)

        if location.id == self._state.target.id:
            self._state.game_won = True
            self._state.game_over = True
        elif self._max_guesses is not None and guess_count >= self._max_guesses:
            self._state.game_over = True

        self._telemetry.emit(
            "guess_accepted",
            {"location_id": location.id, "guess_count": guess_count, "mode": self._state.mode.value},
        )
        if self._state.game_over:
            self._telemetry.emit(
                "game_over",
                {"won": self._state.game_won, "guess_count": guess_count, "mode": self._state.mode.value},
            )

        guess_word = "guess" if guess_count == 1 else "guesses"
        if self._state.game_won:
            message = f"You found the location in {guess_count} {guess_word}!"
        elif self._state.game_over:
            message = "Out of guesses."
        else:
            message = f"{guess_count} {guess_word} made. Keep trying!"
        return GuessOutcome(record=record, message=message)

    def _reject(self, rejection: GuessRejection, raw_name: str) -> GuessOutcome:
        self._logger.info("guess_rejected", extra={"reason": rejection.value, "guess": raw_name})
        return GuessOutcome(rejection=rejection, message=_REJECTION_MESSAGES[rejection])
