from __future__ import annotations

from datetime import date

from rich.console import Console

from donkdle.evaluator import evaluate
from donkdle.models import ChannelStatus, GuessRecord, Location, MovesFeedback, RequirementArrow
from donkdle.presentation import (
    format_moves_cell,
    format_moves_preview,
    format_requirement_cell,
    render_answer,
    render_board,
    render_search_hits,
)
from donkdle.search import SearchHit
from donkdle.share import build_share_text

TARGET = Location(id="1", name="Hillside Banana", hint_region="Hillside", level="Japes", kong="Donkey", moves=("Strong Kong",))
NEAR = Location(id="2", name="Hive Beehive", hint_region="Hivetunnel", level="Japes", kong="Any", moves=())


def _record(location: Location) -> GuessRecord:
    return GuessRecord(location=location, feedback=evaluate(location, TARGET))


def _render(renderable) -> str:
    console = Console(width=160, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_share_text_for_a_win() -> None:
    text = build_share_text([_record(NEAR), _record(TARGET)], won=True, day=date(2024, 3, 9))
    assert text == "Donkdle 3/9/2024 🎉\n2/∞\n\n🟨🟨⬛⬛\n🟩🟩🟩🟩\n"


def test_share_text_for_a_loss_with_limit() -> None:
    text = build_share_text([_record(NEAR)], won=False, day=date(2024, 12, 25), max_guesses=6)
    assert text.splitlines()[:2] == ["Donkdle 12/25/2024 😢", "X/6"]


def test_moves_cell_shows_none_even_when_correct() -> None:
    assert format_moves_cell(MovesFeedback(status=ChannelStatus.CORRECT)) == "None"
    assert format_moves_cell(MovesFeedback(status=ChannelStatus.PRESENT, common=("Vines",), extra=("Diving",))) == (
        "✓ Vines\nDiving"
    )


def test_requirement_cell_arrows() -> None:
    assert format_requirement_cell(2, RequirementArrow.HIGHER) == "2 ↑"
    assert format_requirement_cell(3, RequirementArrow.LOWER) == "3 ↓"
    assert format_requirement_cell(1, RequirementArrow.NONE) == "1"


def test_moves_preview_truncates_after_five() -> None:
    moves = ("A", "B", "C", "D", "E", "F")
    assert format_moves_preview(moves) == "A, B, C, D, E..."
    assert format_moves_preview(moves[:2]) == "A, B"


def test_board_uses_region_display_names() -> None:
    output = _render(render_board([_record(NEAR)]))
    assert "Hive Tunnel" in output
    assert "Hive Beehive" in output


def test_catalog_text_with_brackets_is_not_treated_as_markup() -> None:
    odd = Location(id="3", name="Crate [b]Lid[/b]", hint_region="[red]Docks", level="Japes", kong="[b]Donkey", moves=("[i]Swim",))

    board = _render(render_board([_record(odd)]))
    hits = _render(render_search_hits([SearchHit(location=odd, score=1.0)]))

    assert "Crate [b]Lid[/b]" in board
    assert "Crate [b]Lid[/b]" in hits
    assert "[red]Docks" in hits
    assert "[b]Donkey" in hits
    assert "[i]Swim" in hits


def test_answer_panel_lists_target_details() -> None:
    output = _render(render_answer(TARGET, won=False, guess_count=3))
    assert "Better luck tomorrow!" in output
    assert "Move Count: 1" in output
    assert "Strong Kong" in output
