"""Structural gatekeeper run before any extraction (cheap checks first)."""

from typing import Any

from graveyard.ingestion.document import as_object, get_array, get_bool, get_number
from graveyard.ingestion.exceptions import (
    InvalidStructureError,
    NoDeathError,
    NotHardcoreError,
)


def validate_save_document(document: Any) -> dict[str, Any]:
    """Check that ``document`` describes a single permanent hardcore death.

    Returns the document narrowed to a dict.

    Raises:
        InvalidStructureError: not an object, or ``pastRunsData`` missing/empty.
        NotHardcoreError: ``hardcoreModeEnabled`` is not ``true``.
        NoDeathError: ``cumulativeTotalDeaths`` is not exactly 1.
    """
    data = as_object(document)
    if data is None:
        raise InvalidStructureError("Invalid save file: not an object.")

    if get_bool(data, "hardcoreModeEnabled") is not True:
        raise NotHardcoreError(
            "Only Hardcore deaths are accepted. hardcoreModeEnabled must be true."
        )

    if get_number(data, "cumulativeTotalDeaths") != 1:
        raise NoDeathError(
            "Save file must have cumulativeTotalDeaths equal to 1 to submit a death."
        )

    if not get_array(data, "pastRunsData"):
        raise InvalidStructureError("pastRunsData is missing or empty.")

    return data
