import json
from collections.abc import Callable
from typing import Any

import pytest

RunFactory = Callable[..., dict[str, Any]]
SaveFactory = Callable[..., dict[str, Any]]


def _serialized(values: dict[str, Any] | None) -> dict[str, Any]:
    return {
        "_serializedList": [{"Key": key, "Value": value} for key, value in (values or {}).items()]
    }


@pytest.fixture()
def make_run() -> RunFactory:
    """Build one pastRunsData entry from plain counter/aggregator dicts."""

    def _make_run(
        counters: dict[str, Any] | None = None,
        aggregators: dict[str, Any] | None = None,
        damage: list[Any] | None = None,
    ) -> dict[str, Any]:
        if counters is None:
            counters = {"LevelAchieved": 12, "EnemiesDefeated": 50}
        if aggregators is None:
            aggregators = {"RunTime": 300}
        if damage is None:
            damage = [{"_totalDamage": 10}, {"_totalDamage": 999}]
        return {
            "_statCounters": _serialized(counters),
            "_statAggregators": _serialized(aggregators),
            "_lastDamageInstances": damage,
        }

    return _make_run


@pytest.fixture()
def make_save(make_run: RunFactory) -> SaveFactory:
    """Build a minimal admissible hardcore-death save document."""

    def _make_save(**overrides: Any) -> dict[str, Any]:
        save: dict[str, Any] = {
            "hardcoreModeEnabled": True,
            "cumulativeTotalDeaths": 1,
            "gameplayTime": 3600,
            "cumulativeTotalRuns": 4,
            "pastRunsData": [make_run()],
            "skillSlots": [
                {"_skillHashId": 5},
                {"_skillHashId": -1},
                {"_skillHashId": 7},
            ],
        }
        save.update(overrides)
        return save

    return _make_save


@pytest.fixture()
def save_text(make_save: SaveFactory) -> str:
    """Raw JSON text of the default save, as a user would upload it."""
    return json.dumps(make_save(), indent=2)
