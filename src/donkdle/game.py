from __future__ import annotations

import random
from datetime import date

from .catalog import LocationCatalog
from .models import Location, PlayerStats
from .search import SearchHit, rank_locations
from .selection import GameMode, select_target
from .session import GameSession, GameState, GuessOutcome
from .share import build_share_text
from .storage import ProgressStore
from .telemetry import Telemetry


class DonkdleGame:
    """Wires the catalog, target selection, session and saved progress for one game."""

    def __init__(
        self,
        catalog: LocationCatalog,
        progress: ProgressStore,
        *,
        mode: GameMode = GameMode.DAILY,
        day: date | None = None,
        rng: random.Random | None = None,
        max_guesses: int | None = None,
        telemetry: Telemetry | None = None,
    ):
        self.catalog = catalog
        self.progress = progress
        self.mode = mode
        self.day = day or date.today()
        self._rng = rng
        self._max_guesses = max_guesses
        self._telemetry = telemetry
        self._session: GameSession | None = None

    @property
    def session(self) -> GameSession:
        if self._session is None:
            self._session = self._start_session()
        return self._session

    @property
    def state(self) -> GameState:
        return self.session.state

    @property
    def target(self) -> Location:
        return self.state.target

    def guess(self, name: str) -> GuessOutcome:
        outcome = self.session.submit(name)
        if not outcome.accepted:
            return outcome

        self.progress.save_game(self.day, self.state)
        if self.state.game_over and self.mode is GameMode.DAILY:
            self.progress.record_result(self.day, won=self.state.game_won)
        return outcome

    def search(self, query: str, *, limit: int = 15, min_length: int = 2) -> list[SearchHit]:
        return rank_locations(self.catalog, query, limit=limit, min_length=min_length)

    def stats(self) -> PlayerStats:
        return self.progress.get_stats()

    def share_text(self) -> str | None:
        if not self.state.game_over:
            return None
        return build_share_text(
            self.state.guesses,
            won=self.state.game_won,
            day=self.day,
            max_guesses=self._max_guesses,
        )

    def _start_session(self) -> GameSession:
        target = select_target(self.catalog, self.mode, day=self.day, rng=self._rng)
        state = None
        if self.mode is GameMode.DAILY:
            state = self.progress.load_game(self.day, catalog=self.catalog, target=target)
        if state is None:
            state = GameState(target=target, mode=self.mode)

        return GameSession(
            catalog=self.catalog,
            state=state,
            max_guesses=self._max_guesses,
            telemetry=self._telemetry,
        )
