"""Spoiler-free share text for a finished game."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from .models import ChannelStatus, GuessRecord

STATUS_MARKERS: dict[ChannelStatus, str] = {
    ChannelStatus.CORRECT: "🟩",
    ChannelStatus.PRESENT: "🟨",
    ChannelStatus.ABSENT: "⬛",
}
UNLIMITED = "∞"


def status_marker(status: ChannelStatus) -> str:
    return STATUS_MARKERS.get(status, STATUS_MARKERS[ChannelStatus.ABSENT])


def format_share_date(day: date) -> str:
    return f"{day.month}/{day.day}/{day.year}"


def build_share_text(
    guesses: Sequence[GuessRecord],
    *,
    won: bool,
    day: date,
    max_guesses: int | None = None,
) -> str:
    emoji = "🎉" if won else "😢"
    limit = str(max_guesses) if max_guesses else UNLIMITED
    tries = f"{len(guesses)}/{limit}" if won else f"X/{limit}"

    lines = [f"Donkdle {format_share_date(day)} {emoji}", tries, ""]
    for record in guesses:
        lines.append("".join(status_marker(status) for status in record.feedback.statuses()))
    return "\n".join(lines) + "\n"
