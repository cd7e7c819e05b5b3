from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

WILDCARD_KONG = "Any"


class ChannelStatus(str, Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class RequirementArrow(str, Enum):
    HIGHER = "higher"
    LOWER = "lower"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class Location:
    """A guessable location from the catalog."""

    id: str
    name: str
    hint_region: str
    level: str
    kong: str
    moves: tuple[str, ...] = ()

    @property
    def move_count(self) -> int:
        return len(self.moves)


@dataclass(frozen=True, slots=True)
class RegionFeedback:
    status: ChannelStatus
    value: str


@dataclass(frozen=True, slots=True)
class KongFeedback:
    status: ChannelStatus
    value: str


@dataclass(frozen=True, slots=True)
class RequirementFeedback:
    status: ChannelStatus
    value: int
    arrow: RequirementArrow = RequirementArrow.NONE


@dataclass(frozen=True, slots=True)
class MovesFeedback:
    """Shared and surplus moves of a guess; moves the guess lacks are never exposed."""

    status: ChannelStatus
    common: tuple[str, ...] = ()
    extra: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Feedback:
    region: RegionFeedback
    kong: KongFeedback
    requirement: RequirementFeedback
    moves: MovesFeedback

    def statuses(self) -> tuple[ChannelStatus, ChannelStatus, ChannelStatus, ChannelStatus]:
        """Channel statuses in display order: region, kong, requirement, moves."""
        return (self.region.status, self.kong.status, self.requirement.status, self.moves.status)


@dataclass(frozen=True, slots=True)
class GuessRecord:
    location: Location
    feedback: Feedback


@dataclass(slots=True)
class PlayerStats:
    played: int = 0
    won: int = 0
    current_streak: int = 0
    max_streak: int = 0
    last_played: str | None = None

    @property
    def win_percentage(self) -> int:
        if not self.played:
            return 0
        # half-up rounding, not round()'s half-even
        return (self.won * 200 + self.played) // (self.played * 2)
