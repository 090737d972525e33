from __future__ import annotations

import json

import pytest

from domain.entities import LeaderboardReport, PlayerStats
from domain.enums import Outcome
from infrastructure.cache import ExpiringCache, MemoryStore
from presentation.cli import ClearCacheCommand, LeaderboardCommand, format_json, format_table


async def _no_sleep(seconds: float) -> None:
    return None


def _report() -> LeaderboardReport:
    return LeaderboardReport(
        rows=[
            PlayerStats(rank="Gold", display_name="Alpha", kd="2.00", external_id="pa"),
            PlayerStats(rank="", display_name="Bravo", kd="7", external_id="pb"),
        ],
        skipped={"Ghost": Outcome.NOT_FOUND, "Slow": Outcome.RATE_LIMITED},
        roster_size=4,
    )


def test_table_lists_rows_in_order_with_summary() -> None:
    text = format_table(_report())
    lines = text.splitlines()

    alpha = next(i for i, line in enumerate(lines) if line.startswith("Alpha"))
    bravo = next(i for i, line in enumerate(lines) if line.startswith("Bravo"))
    assert alpha < bravo
    assert "Gold" in lines[alpha] and "2.00" in lines[alpha]
    assert "-" in lines[bravo].split()
    assert lines[-1] == "2 of 4 roster members shown (1 not found, 1 rate limited)"


def test_table_for_empty_report() -> None:
    text = format_table(LeaderboardReport())
    assert "No players to show." in text
    assert text.splitlines()[-1] == "0 of 0 roster members shown"


def test_json_output() -> None:
    data = json.loads(format_json(_report()))
    assert [row["playerName"] for row in data["rows"]] == ["Alpha", "Bravo"]
    assert data["skipped"] == {"Ghost": "not_found", "Slow": "rate_limited"}


@pytest.mark.asyncio
async def test_command_builds_with_injected_store(upstream) -> None:
    upstream.add_member("Alpha", "pa", rank="Gold", kills=9, deaths=3)
    store = MemoryStore()
    command = LeaderboardCommand(store=store, transport=upstream.transport, sleep=_no_sleep)

    report = await command.build()

    assert [(r.display_name, r.kd) for r in report.rows] == [("Alpha", "3.00")]
    assert len(store) == 3


def test_clear_cache_command(capsys) -> None:
    store = MemoryStore()
    cache = ExpiringCache(store)
    cache.set("playerNames", ["Alpha"], 60_000)
    cache.set("breacherPlayer_Alpha", None, 60_000)

    assert ClearCacheCommand(store=store).run(confirm=True) == 2
    assert len(store) == 0
    assert "Cleared 2 cached entries." in capsys.readouterr().out


def test_clear_cache_command_requires_confirmation(monkeypatch) -> None:
    store = MemoryStore()
    ExpiringCache(store).set("playerNames", ["Alpha"], 60_000)
    monkeypatch.setattr("builtins.input", lambda prompt="": "no")

    assert ClearCacheCommand(store=store).run() == 0
    assert len(store) == 1
