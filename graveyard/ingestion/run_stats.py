from typing import Any

from graveyard.ingestion.document import as_object, get_array, is_number, last_element
from graveyard.ingestion.exceptions import (
    InvalidStructureError,
    MissingFieldError,
    NoDamageHistoryError,
)
from graveyard.ingestion.field_policy import FieldPolicy, get_field_policy
from graveyard.ingestion.models import LastRunStats
from graveyard.ingestion.serialized_list import lookup, lookup_required, serialized_list


def extract_last_run_stats(
    past_runs: list[Any],
    policy: FieldPolicy | None = None,
) -> LastRunStats:
    """Extract metrics from the last entry of ``pastRunsData``.

    Each metric is resolved through ``policy`` (canonical version when not
    given). A level of 0 or below is reported as 1.

    Raises:
        MissingFieldError: a required metric, or ``_totalDamage`` on the final
            damage instance, is absent or non-numeric.
        NoDamageHistoryError: the run has no damage instances.
    """
    policy = policy or get_field_policy()
    run = as_object(last_element(past_runs))
    if run is None:
        raise InvalidStructureError("Final run entry is not an object.")

    values: dict[str, int | float] = {}
    for spec in policy.fields:
        entries = serialized_list(run.get(spec.source.value))
        values[spec.name] = (
            lookup_required(entries, spec.key) if spec.required else lookup(entries, spec.key)
        )

    if values["level"] <= 0:
        values["level"] = 1

    return LastRunStats(damage_taken=_fatal_damage(run), **values)


def _fatal_damage(run: dict[str, Any]) -> int | float:
    instances = get_array(run, "_lastDamageInstances")
    if not instances:
        raise NoDamageHistoryError()
    total = as_object(instances[-1])
    value = total.get("_totalDamage") if total is not None else None
    if not is_number(value):
        raise MissingFieldError("_totalDamage")
    return value
