"""Saved daily games and aggregate player statistics."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any

from donkdle.catalog import LocationCatalog
from donkdle.models import (
    ChannelStatus,
    Feedback,
    GuessRecord,
    KongFeedback,
    Location,
    MovesFeedback,
    PlayerStats,
    RegionFeedback,
    RequirementArrow,
    RequirementFeedback,
)
from donkdle.selection import GameMode
from donkdle.session import GameState
from donkdle.storage.key_value import KeyValueStore

STATS_KEY = "donkdle_stats"


def day_key(day: date) -> str:
    return f"donkdle_{day.year}_{day.month}_{day.day}"


def feedback_to_payload(feedback: Feedback) -> dict[str, Any]:
    return {
        "region": {"status": feedback.region.status.value, "value": feedback.region.value},
        "kong": {"status": feedback.kong.status.value, "value": feedback.kong.value},
        "requirement": {
            "status": feedback.requirement.status.value,
            "value": feedback.requirement.value,
            "arrow": feedback.requirement.arrow.value,
        },
        "moves": {
            "status": feedback.moves.status.value,
            "feedback": {"common": list(feedback.moves.common), "extra": list(feedback.moves.extra)},
        },
    }


def _section(payload: dict[str, Any], name: str) -> dict[str, Any]:
    section = payload[name]
    if not isinstance(section, dict):
        raise TypeError(f"Saved feedback field {name!r} must be an object")
    return section


def feedback_from_payload(payload: dict[str, Any]) -> Feedback:
    region = _section(payload, "region")
    kong = _section(payload, "kong")
    requirement = _section(payload, "requirement")
    moves = _section(payload, "moves")
    move_lists = _section(moves, "feedback") if moves.get("feedback") else {}
    return Feedback(
        region=RegionFeedback(status=ChannelStatus(region["status"]), value=region["value"]),
        kong=KongFeedback(status=ChannelStatus(kong["status"]), value=kong["value"]),
        requirement=RequirementFeedback(
            status=ChannelStatus(requirement["status"]),
            value=int(requirement["value"]),
            arrow=RequirementArrow(requirement.get("arrow") or RequirementArrow.NONE.value),
        ),
        moves=MovesFeedback(
            status=ChannelStatus(moves["status"]),
            common=tuple(move_lists.get("common", ())),
            extra=tuple(move_lists.get("extra", ())),
        ),
    )


def _is_legacy_payload(guesses: list[dict[str, Any]]) -> bool:
    if not guesses:
        return False
    feedback = guesses[0].get("feedback")
    return not isinstance(feedback, dict) or not feedback.get("moves")


class ProgressStore:
    """Persists the daily game and win statistics on top of a ``KeyValueStore``."""

    def __init__(self, store: KeyValueStore, *, logger: logging.Logger | None = None) -> None:
        self._store = store
        self._logger = logger or logging.getLogger("donkdle.storage.progress")

    def save_game(self, day: date, state: GameState) -> None:
        if state.mode is GameMode.RANDOM:
            return

        self._store.set(
            day_key(day),
            {
                "guesses": [
                    {"location_id": record.location.id, "feedback": feedback_to_payload(record.feedback)}
                    for record in state.guesses
                ],
                "game_over": state.game_over,
                "game_won": state.game_won,
            },
        )

    def load_game(self, day: date, *, catalog: LocationCatalog, target: Location) -> GameState | None:
        key = day_key(day)
        payload = self._store.get(key)
        if payload is None:
            return None

        raw_guesses = None
        if isinstance(payload, dict):
            raw_guesses = payload.get("guesses") or []
        if not isinstance(raw_guesses, list) or not all(isinstance(item, dict) for item in raw_guesses):
            self._discard(key, reason="undecodable")
            return None

        if _is_legacy_payload(raw_guesses):
            self._discard(key, reason="legacy_format")
            return None

        try:
            guesses = [self._decode_guess(item, catalog) for item in raw_guesses]
        except (AttributeError, KeyError, TypeError, ValueError):
            self._logger.exception("saved_game_discarded", extra={"key": key, "reason": "undecodable"})
            self._store.delete(key)
            return None

        return GameState(
            target=target,
            mode=GameMode.DAILY,
            guesses=guesses,
            game_over=bool(payload.get("game_over", False)),
            game_won=bool(payload.get("game_won", False)),
        )

    def get_stats(self) -> PlayerStats:
        raw = self._store.get(STATS_KEY)
        if not isinstance(raw, dict):
            return PlayerStats()
        return PlayerStats(
            played=int(raw.get("played") or 0),
            won=int(raw.get("won") or 0),
            current_streak=int(raw.get("current_streak") or 0),
            max_streak=int(raw.get("max_streak") or 0),
            last_played=raw.get("last_played"),
        )

    def record_result(self, day: date, *, won: bool) -> PlayerStats:
        """Count a finished game once per day and update the win streak."""
        stats = self.get_stats()
        today = day.isoformat()
        if stats.last_played == today:
            return stats

        yesterday = (day - timedelta(days=1)).isoformat()
        stats.played += 1
        if won:
            stats.won += 1
            stats.current_streak = stats.current_streak + 1 if stats.last_played == yesterday else 1
            stats.max_streak = max(stats.max_streak, stats.current_streak)
        else:
            stats.current_streak = 0
        stats.last_played = today

        self._store.set(
            STATS_KEY,
            {
                "played": stats.played,
                "won": stats.won,
                "current_streak": stats.current_streak,
                "max_streak": stats.max_streak,
                "last_played": stats.last_played,
            },
        )
        self._logger.info(
            "stats_recorded",
            extra={"played": stats.played, "won_game": won, "current_streak": stats.current_streak},
        )
        return stats

    @staticmethod
    def _decode_guess(item: dict[str, Any], catalog: LocationCatalog) -> GuessRecord:
        location = catalog.get(str(item["location_id"]))
        if location is None:
            raise ValueError(f"Unknown location id in saved game: {item['location_id']}")
        return GuessRecord(location=location, feedback=feedback_from_payload(item["feedback"]))

    def _discard(self, key: str, *, reason: str) -> None:
        self._logger.warning("saved_game_discarded", extra={"key": key, "reason": reason})
        self._store.delete(key)
