from collections.abc import Iterable
from typing import Any

from graveyard.ingestion.document import as_object
from graveyard.ingestion.field_policy import StatSource
from graveyard.ingestion.models import CareerStats
from graveyard.ingestion.serialized_list import lookup, serialized_list


def aggregate_career(past_runs: Iterable[Any]) -> CareerStats:
    """Sum lifetime totals over every run.

    All lookups are optional: a historical run with a missing or malformed
    stat block contributes 0 rather than failing the ingestion.
    """
    gold = soulstones = kills = elite_kills = bosses = 0
    for item in past_runs:
        run = as_object(item) or {}
        counters = serialized_list(run.get(StatSource.COUNTERS.value))
        aggregators = serialized_list(run.get(StatSource.AGGREGATORS.value))

        gold += lookup(aggregators, "GoldGained")
        soulstones += lookup(counters, "SoulStonesCollected")
        kills += lookup(counters, "EnemiesDefeated")
        elite_kills += lookup(counters, "EliteEnemiesDefeated")
        bosses += lookup(counters, "BossEnemiesDefeated")

    return CareerStats(
        gold=gold,
        soulstones=soulstones,
        kills=kills,
        elite_kills=elite_kills,
        bosses=bosses,
    )
