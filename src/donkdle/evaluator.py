"""Scores a guessed location against the target across the four feedback channels."""

from __future__ import annotations

from .models import (
    WILDCARD_KONG,
    ChannelStatus,
    Feedback,
    KongFeedback,
    Location,
    MovesFeedback,
    RegionFeedback,
    RequirementArrow,
    RequirementFeedback,
)


def parse_kongs(kong: str) -> frozenset[str]:
    """Split a comma-separated kong field into trimmed labels."""
    return frozenset(label.strip() for label in kong.split(","))


def _unique(items: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))


def evaluate_region(guessed: Location, target: Location) -> RegionFeedback:
    status = ChannelStatus.ABSENT
    if guessed.hint_region == target.hint_region:
        status = ChannelStatus.CORRECT
    elif guessed.level == target.level:
        status = ChannelStatus.PRESENT
    return RegionFeedback(status=status, value=guessed.hint_region)


def evaluate_kong(guessed: Location, target: Location) -> KongFeedback:
    guessed_kongs = parse_kongs(guessed.kong)
    target_kongs = parse_kongs(target.kong)

    status = ChannelStatus.ABSENT
    if guessed_kongs == target_kongs:
        status = ChannelStatus.CORRECT
    elif guessed_kongs & target_kongs or WILDCARD_KONG in guessed_kongs or WILDCARD_KONG in target_kongs:
        status = ChannelStatus.PRESENT
    return KongFeedback(status=status, value=guessed.kong)


def evaluate_requirement(guessed: Location, target: Location) -> RequirementFeedback:
    guessed_count = len(guessed.moves or ())
    target_count = len(target.moves or ())

    if guessed_count == target_count:
        return RequirementFeedback(status=ChannelStatus.CORRECT, value=guessed_count)

    arrow = RequirementArrow.HIGHER if guessed_count < target_count else RequirementArrow.LOWER
    return RequirementFeedback(status=ChannelStatus.ABSENT, value=guessed_count, arrow=arrow)


def evaluate_moves(guessed: Location, target: Location) -> MovesFeedback:
    guessed_moves = _unique(tuple(guessed.moves or ()))
    target_moves = _unique(tuple(target.moves or ()))
    guessed_set = set(guessed_moves)
    target_set = set(target_moves)

    common = tuple(move for move in guessed_moves if move in target_set)
    missing = tuple(move for move in target_moves if move not in guessed_set)
    extra = tuple(move for move in guessed_moves if move not in target_set)

    status = ChannelStatus.ABSENT
    if (
        len(guessed_set) == len(target_set)
        and len(common) == len(target_set)
        and not missing
        and not extra
    ):
        status = ChannelStatus.CORRECT
    elif common:
        status = ChannelStatus.PRESENT

    # missing only decides the status; exposing it would give away the answer
    return MovesFeedback(status=status, common=common, extra=extra)


def evaluate(guessed: Location, target: Location) -> Feedback:
    """Build the feedback record for ``guessed`` when the answer is ``target``.

    Pure and total for catalog-validated locations: the same pair always yields an
    equal ``Feedback``.
    """
    return Feedback(
        region=evaluate_region(guessed, target),
        kong=evaluate_kong(guessed, target),
        requirement=evaluate_requirement(guessed, target),
        moves=evaluate_moves(guessed, target),
    )
