"""Versioned table of which run metrics are required and where they live.

A new game patch that renames or drops a stat should only need a new entry
in ``FIELD_POLICIES``; the extractor never branches on individual fields.
"""

from dataclasses import dataclass
from enum import Enum

from graveyard.ingestion.exceptions import UnknownFieldPolicyError


class StatSource(str, Enum):
    COUNTERS = "_statCounters"
    AGGREGATORS = "_statAggregators"


@dataclass(frozen=True)
class FieldSpec:
    """One last-run metric: target attribute, save key, stat block, strictness."""

    name: str
    key: str
    source: StatSource
    required: bool = False


@dataclass(frozen=True)
class FieldPolicy:
    version: str
    fields: tuple[FieldSpec, ...]

    def by_name(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(name)


def _fields(*, level_required: bool, duration_required: bool) -> tuple[FieldSpec, ...]:
    return (
        FieldSpec("level", "LevelAchieved", StatSource.COUNTERS, required=level_required),
        FieldSpec("kills", "EnemiesDefeated", StatSource.COUNTERS),
        FieldSpec("regular_kills", "RegularEnemiesDefeated", StatSource.COUNTERS),
        FieldSpec("elite_kills", "EliteEnemiesDefeated", StatSource.COUNTERS),
        FieldSpec("boss_kills", "BossEnemiesDefeated", StatSource.COUNTERS),
        FieldSpec("soulstones", "SoulStonesCollected", StatSource.COUNTERS),
        FieldSpec("gold", "GoldGained", StatSource.AGGREGATORS),
        FieldSpec("damage_dealt", "DamageDealt", StatSource.AGGREGATORS),
        FieldSpec("duration", "RunTime", StatSource.AGGREGATORS, required=duration_required),
    )


FIELD_POLICIES: dict[str, FieldPolicy] = {
    # Early revision: every run metric defaulted to 0 when missing.
    "v1": FieldPolicy("v1", _fields(level_required=False, duration_required=False)),
    "v2": FieldPolicy("v2", _fields(level_required=True, duration_required=True)),
}

DEFAULT_FIELD_POLICY_VERSION = "v2"


def get_field_policy(version: str = DEFAULT_FIELD_POLICY_VERSION) -> FieldPolicy:
    """Return the policy for ``version``.

    Raises:
        UnknownFieldPolicyError: if no such version is registered.
    """
    policy = FIELD_POLICIES.get(version)
    if policy is None:
        raise UnknownFieldPolicyError(
            f"Unknown field policy '{version}'. Choose from: {sorted(FIELD_POLICIES)}"
        )
    return policy
