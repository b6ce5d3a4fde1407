from dataclasses import dataclass, field

Number = int | float


@dataclass(frozen=True)
class LastRunStats:
    """Metrics from the final run, the one in which the character died."""

    level: Number
    damage_taken: Number
    kills: Number = 0
    regular_kills: Number = 0
    elite_kills: Number = 0
    boss_kills: Number = 0
    soulstones: Number = 0
    gold: Number = 0
    damage_dealt: Number = 0
    duration: Number = 0


@dataclass(frozen=True)
class CareerStats:
    """Totals summed across every recorded run."""

    gold: Number = 0
    soulstones: Number = 0
    kills: Number = 0
    elite_kills: Number = 0
    bosses: Number = 0


@dataclass(frozen=True)
class ExtractedDeathPayload:
    """Canonical death record produced from one save snapshot."""

    level: Number
    damage_taken: Number
    career_seconds: Number
    career_runs: Number
    career_kills: Number
    career_elite_kills: Number
    career_bosses: Number
    career_gold: Number
    career_soulstones: Number
    last_run_kills: Number
    last_run_soulstones: Number
    last_run_regular_kills: Number
    last_run_elite_kills: Number
    last_run_boss_kills: Number
    last_run_gold: Number
    last_run_damage_dealt: Number
    last_run_duration: Number
    skill_ids: list[int] = field(default_factory=list)
