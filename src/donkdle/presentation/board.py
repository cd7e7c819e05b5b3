"""Rich renderables for the guess board, autocomplete hits and the answer reveal."""

from __future__ import annotations

from collections.abc import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from donkdle.catalog import format_region_name
from donkdle.models import ChannelStatus, GuessRecord, Location, MovesFeedback, PlayerStats, RequirementArrow
from donkdle.search import SearchHit

STATUS_STYLES: dict[ChannelStatus, str] = {
    ChannelStatus.CORRECT: "bold black on green",
    ChannelStatus.PRESENT: "bold black on yellow",
    ChannelStatus.ABSENT: "white on grey23",
}
ARROW_SYMBOLS: dict[RequirementArrow, str] = {
    RequirementArrow.HIGHER: "↑",
    RequirementArrow.LOWER: "↓",
    RequirementArrow.NONE: "",
}
MOVES_PREVIEW_LIMIT = 5


def format_moves_cell(moves: MovesFeedback) -> str:
    # drawn text is independent of status: two empty move sets are "correct" yet show None
    if not moves.common and not moves.extra:
        return "None"
    chips = [f"✓ {move}" for move in moves.common]
    chips.extend(moves.extra)
    return "\n".join(chips)


def format_requirement_cell(value: int, arrow: RequirementArrow) -> str:
    symbol = ARROW_SYMBOLS[arrow]
    return f"{value} {symbol}" if symbol else str(value)


def format_moves_preview(moves: Sequence[str]) -> str:
    preview = ", ".join(moves[:MOVES_PREVIEW_LIMIT])
    if len(moves) > MOVES_PREVIEW_LIMIT:
        preview += "..."
    return preview


def _cell(text: str, status: ChannelStatus) -> Text:
    return Text(text, style=STATUS_STYLES[status])


def render_board(guesses: Sequence[GuessRecord], *, game_over: bool = False) -> Table:
    table = Table(title="Donkdle", show_lines=True)
    table.add_column("Location")
    table.add_column("Region")
    table.add_column("Kong")
    table.add_column("Reqs", justify="center")
    table.add_column("Moves")

    for record in guesses:
        feedback = record.feedback
        table.add_row(
            Text(record.location.name),
            _cell(format_region_name(feedback.region.value), feedback.region.status),
            _cell(feedback.kong.value, feedback.kong.status),
            _cell(
                format_requirement_cell(feedback.requirement.value, feedback.requirement.arrow),
                feedback.requirement.status,
            ),
            _cell(format_moves_cell(feedback.moves), feedback.moves.status),
        )

    if not game_over:
        table.add_row("?", "", "", "", "")
    return table


def render_search_hits(hits: Sequence[SearchHit]) -> Table:
    table = Table(show_header=True, box=None)
    table.add_column("Name", style="bold")
    table.add_column("Region")
    table.add_column("Kong")
    table.add_column("Reqs")
    table.add_column("Moves", style="dim")
    for hit in hits:
        location = hit.location
        table.add_row(
            Text(location.name),
            Text(format_region_name(location.hint_region)),
            Text(location.kong),
            f"{location.move_count} moves",
            Text(format_moves_preview(location.moves)),
        )
    return table


def render_answer(location: Location, *, won: bool, guess_count: int, daily: bool = True) -> Panel:
    if won:
        guess_word = "guess" if guess_count == 1 else "guesses"
        title = "🎉 Congratulations! 🎉"
        headline = f"You found the location in {guess_count} {guess_word}!"
    else:
        title = "😢 Game Over"
        headline = "Better luck tomorrow!" if daily else "Better luck next time!"

    moves_text = ", ".join(location.moves) if location.moves else "None"
    body = Text()
    body.append(f"{headline}\n\n")
    body.append("Today's Location:\n" if daily else "The Location:\n", style="bold")
    for label, value in (
        ("Name", location.name),
        ("Region", format_region_name(location.hint_region)),
        ("Level", location.level),
        ("Kong", location.kong),
        ("Move Count", str(location.move_count)),
        ("Moves", moves_text),
    ):
        body.append(f"{label}: ", style="bold")
        body.append(f"{value}\n")
    return Panel(body, title=title)


def render_stats(stats: PlayerStats) -> Table:
    table = Table(title="Statistics", show_header=False)
    table.add_column("Stat")
    table.add_column("Value", justify="right")
    table.add_row("Played", str(stats.played))
    table.add_row("Win %", str(stats.win_percentage))
    table.add_row("Current Streak", str(stats.current_streak))
    table.add_row("Max Streak", str(stats.max_streak))
    return table
