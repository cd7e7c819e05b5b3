from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def cli(monkeypatch, tmp_path: Path):
    typer_testing = pytest.importorskip("typer.testing")
    from donkdle import main

    catalog_path = tmp_path / "locations.json"
    catalog_path.write_text(
        json.dumps(
            [{"id": 1, "name": "Only Spot", "hint_region": "Hillside", "level": "Japes", "kong": "Donkey", "moves": []}]
        ),
        encoding="utf-8",
    )
    monkeypatch.setattr(main.settings, "catalog_path", str(catalog_path))
    monkeypatch.setattr(main.settings, "state_path", str(tmp_path / "state.json"))

    runner = typer_testing.CliRunner()
    return lambda *args: runner.invoke(main.app, list(args), catch_exceptions=False)


def test_guess_unknown_location_exits_with_error(cli) -> None:
    result = cli("guess", "Nowhere")

    assert result.exit_code == 1
    assert "Location not found" in result.stdout


def test_guess_win_then_share(cli, tmp_path: Path) -> None:
    result = cli("guess", "only spot")
    assert result.exit_code == 0
    assert "You found the location in 1 guess!" in result.stdout

    shared = cli("share")
    assert shared.exit_code == 0
    assert "🟩🟩🟩🟩" in shared.stdout

    again = cli("guess", "Only Spot")
    assert again.exit_code == 1
    assert "already over" in again.stdout

    saved = json.loads((tmp_path / "state.json").read_text(encoding="utf-8"))
    assert saved["donkdle_stats"]["won"] == 1


def test_share_before_finishing_exits_with_error(cli) -> None:
    result = cli("share")

    assert result.exit_code == 1
    assert "not finished" in result.stdout


def test_missing_catalog_reports_error(cli, monkeypatch, tmp_path: Path) -> None:
    from donkdle import main

    monkeypatch.setattr(main.settings, "catalog_path", str(tmp_path / "absent.json"))
    result = cli("stats")

    assert result.exit_code == 1
    assert "does not exist" in result.stdout


def test_play_reads_guesses_until_win(cli) -> None:
    pytest.importorskip("typer.testing")
    from typer.testing import CliRunner

    from donkdle import main

    result = CliRunner().invoke(main.app, ["play"], input="?on\nOnly Spot\n", catch_exceptions=False)

    assert result.exit_code == 0
    assert "You found the location in 1 guess!" in result.stdout
    assert "Donkdle" in result.stdout
