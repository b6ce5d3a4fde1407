from dataclasses import dataclass, field
from datetime import datetime

from graveyard.ingestion.models import ExtractedDeathPayload


@dataclass(frozen=True)
class NewDeath:
    """Everything needed to insert one row into ``deaths``."""

    user_id: str
    character_name: str
    mourned_by: str
    unique_hash: str
    payload: ExtractedDeathPayload


@dataclass
class DeathRecord:
    """Represents a row from the deaths table."""

    id: str
    user_id: str
    character_name: str
    level: int
    unique_hash: str
    is_hardcore: bool = True
    mourned_by: str | None = None
    damage_taken: float | None = None
    career_seconds: float | None = None
    career_runs: int | None = None
    career_kills: int | None = None
    career_elite_kills: int | None = None
    career_bosses: int | None = None
    career_gold: int | None = None
    career_soulstones: int | None = None
    skill_ids: list[int] = field(default_factory=list)
    last_run_kills: int | None = None
    last_run_soulstones: int | None = None
    last_run_regular_kills: int | None = None
    last_run_elite_kills: int | None = None
    last_run_boss_kills: int | None = None
    last_run_gold: int | None = None
    last_run_damage_dealt: float | None = None
    last_run_duration: float | None = None
    respects_paid: int = 0
    death_date: datetime | None = None
