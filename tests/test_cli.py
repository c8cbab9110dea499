from __future__ import annotations

import re

import pytest
from typer.testing import CliRunner

from deckcards.cli.main import app

runner = CliRunner()

_CARD_LINE = re.compile(r"^(10|[2-9JQKA])[CDHS] - \w+ of \w+$")


def _card_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if _CARD_LINE.match(line)]


def test_demo_walks_through_the_full_scenario() -> None:
    result = runner.invoke(app, ["--seed", "7", "demo"], input="3\n5\ny\n")

    assert result.exit_code == 0, result.output
    output = result.stdout
    assert "Shuffling 3/3..." in output
    assert "Drew 5 card(s):" in output
    assert "Deck sorted by rank then suit." in output
    lines = _card_lines(output)
    assert len(lines) == 5 + 47 + 52
    final = lines[-52:]
    assert final[0] == "AS - Ace of Spades"
    assert final[1] == "AH - Ace of Hearts"
    assert final[-1] == "2C - Two of Clubs"


def test_demo_treats_malformed_answers_as_safe_defaults() -> None:
    result = runner.invoke(app, ["demo"], input="abc\n-2\nn\n")

    assert result.exit_code == 0, result.output
    output = result.stdout
    assert "Invalid input. Deck will not be shuffled." in output
    assert "No cards drawn." in output
    assert "Deck not sorted." in output
    lines = _card_lines(output)
    assert len(lines) == 104
    assert lines[:2] == ["AS - Ace of Spades", "KS - King of Spades"]
    assert lines[52:54] == ["AS - Ace of Spades", "KS - King of Spades"]


def test_demo_survives_closed_input() -> None:
    result = runner.invoke(app, ["demo"], input="")

    assert result.exit_code == 0, result.output
    assert "Deck not sorted." in result.stdout
    assert len(_card_lines(result.stdout)) == 104


def test_demo_options_answer_prompts() -> None:
    result = runner.invoke(app, ["demo", "--shuffles", "0", "--draw", "60", "--sort"])

    assert result.exit_code == 0, result.output
    assert "Drew 52 card(s):" in result.stdout
    assert "(Y/N): Y" in result.stdout
    assert "Deck sorted by rank then suit." in result.stdout
    assert len(_card_lines(result.stdout)) == 104


def test_demo_no_sort_flag_skips_sorting() -> None:
    result = runner.invoke(app, ["demo", "--shuffles", "0", "--draw", "0", "--no-sort"])

    assert result.exit_code == 0, result.output
    assert "(Y/N): N" in result.stdout
    assert "Deck not sorted." in result.stdout
    lines = _card_lines(result.stdout)
    assert lines[52:54] == ["AS - Ace of Spades", "KS - King of Spades"]


def test_demo_is_reproducible_with_seed() -> None:
    first = runner.invoke(app, ["--seed", "99", "demo", "--shuffles", "2", "--draw", "0", "--no-sort"])
    second = runner.invoke(app, ["--seed", "99", "demo", "--shuffles", "2", "--draw", "0", "--no-sort"])

    assert first.exit_code == 0
    assert first.stdout == second.stdout


def test_deal_draws_requested_cards() -> None:
    result = runner.invoke(app, ["--seed", "3", "deal", "--count", "5", "--shuffles", "2"])

    assert result.exit_code == 0, result.output
    assert len(_card_lines(result.stdout)) == 5
    assert "47 card(s) remaining." in result.stdout


def test_deal_without_shuffle_draws_from_the_top() -> None:
    result = runner.invoke(app, ["deal", "--count", "2", "--shuffles", "0"])

    assert result.exit_code == 0, result.output
    assert _card_lines(result.stdout) == ["AS - Ace of Spades", "KS - King of Spades"]


def test_deal_rejects_negative_count() -> None:
    result = runner.invoke(app, ["deal", "--count", "-1"])

    assert result.exit_code != 0


def test_list_prints_canonical_order() -> None:
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0, result.output
    lines = _card_lines(result.stdout)
    assert len(lines) == 52
    assert lines[0] == "2C - Two of Clubs"
    assert lines[13] == "2D - Two of Diamonds"
    assert lines[-1] == "AS - Ace of Spades"


def test_list_sorted_prints_rank_then_suit() -> None:
    result = runner.invoke(app, ["list", "--sorted"])

    assert result.exit_code == 0, result.output
    lines = _card_lines(result.stdout)
    assert lines[:4] == [
        "2C - Two of Clubs",
        "2D - Two of Diamonds",
        "2H - Two of Hearts",
        "2S - Two of Spades",
    ]
    assert lines[-1] == "AS - Ace of Spades"


def test_list_table_renders_suit_columns() -> None:
    result = runner.invoke(app, ["list", "--table"])

    assert result.exit_code == 0, result.output
    assert "Canonical deck" in result.stdout
    assert "Spades" in result.stdout


def test_unknown_log_level_falls_back_to_warning() -> None:
    result = runner.invoke(app, ["--log-level", "basic_format", "list"])

    assert result.exit_code == 0, result.output
    assert len(_card_lines(result.stdout)) == 52


def test_invalid_seed_environment_is_a_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DECKCARDS_SEED", "abc")

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)
    assert "DECKCARDS_SEED" in result.output
