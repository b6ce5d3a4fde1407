from typing import Any

from graveyard.ingestion.career import aggregate_career
from graveyard.ingestion.document import get_array, get_number
from graveyard.ingestion.exceptions import InvalidStructureError, MissingFieldError
from graveyard.ingestion.field_policy import FieldPolicy
from graveyard.ingestion.loadout import LOADOUT_WIDTH, LoadoutPadding, resolve_loadout
from graveyard.ingestion.models import CareerStats, ExtractedDeathPayload, LastRunStats
from graveyard.ingestion.run_stats import extract_last_run_stats


def assemble_death_payload(
    document: dict[str, Any],
    last_run: LastRunStats,
    career: CareerStats,
    skill_ids: list[int],
    *,
    require_top_level_fields: bool = True,
) -> ExtractedDeathPayload:
    """Merge per-run, career and loadout results with the top-level counters.

    Raises:
        MissingFieldError: ``gameplayTime`` or ``cumulativeTotalRuns`` is absent
            or non-numeric while ``require_top_level_fields`` is set. Otherwise
            the missing value is reported as 0.
    """
    career_seconds = _top_level_number(document, "gameplayTime", require_top_level_fields)
    career_runs = _top_level_number(document, "cumulativeTotalRuns", require_top_level_fields)

    return ExtractedDeathPayload(
        level=last_run.level,
        damage_taken=last_run.damage_taken,
        career_seconds=career_seconds,
        career_runs=career_runs,
        career_kills=career.kills,
        career_elite_kills=career.elite_kills,
        career_bosses=career.bosses,
        career_gold=career.gold,
        career_soulstones=career.soulstones,
        last_run_kills=last_run.kills,
        last_run_soulstones=last_run.soulstones,
        last_run_regular_kills=last_run.regular_kills,
        last_run_elite_kills=last_run.elite_kills,
        last_run_boss_kills=last_run.boss_kills,
        last_run_gold=last_run.gold,
        last_run_damage_dealt=last_run.damage_dealt,
        last_run_duration=last_run.duration,
        skill_ids=list(skill_ids),
    )


def extract_death_payload(
    document: dict[str, Any],
    *,
    policy: FieldPolicy | None = None,
    loadout_padding: LoadoutPadding = "omit",
    loadout_width: int = LOADOUT_WIDTH,
    require_top_level_fields: bool = True,
) -> ExtractedDeathPayload:
    """Run every extractor over a validated document and assemble the payload."""
    past_runs = get_array(document, "pastRunsData")
    if not past_runs:
        raise InvalidStructureError("pastRunsData is missing or empty.")

    last_run = extract_last_run_stats(past_runs, policy)
    career = aggregate_career(past_runs)
    skill_ids = resolve_loadout(document.get("skillSlots"), loadout_padding, loadout_width)
    return assemble_death_payload(
        document,
        last_run,
        career,
        skill_ids,
        require_top_level_fields=require_top_level_fields,
    )


def _top_level_number(document: dict[str, Any], key: str, required: bool) -> int | float:
    value = get_number(document, key)
    if value is not None:
        return value
    if required:
        raise MissingFieldError(key)
    return 0
