from typing import Any, Literal

from graveyard.ingestion.document import as_array, as_object

EMPTY_SLOT = -1
LOADOUT_WIDTH = 5

LoadoutPadding = Literal["omit", "pad"]


def resolve_loadout(
    skill_slots: Any,
    padding: LoadoutPadding = "omit",
    width: int = LOADOUT_WIDTH,
) -> list[int]:
    """Equipped skill ids in slot order, at most ``width`` of them.

    Empty slots (``_skillHashId == -1``) and slots without an integer id are
    dropped. With ``padding="pad"`` the result is right-filled with 0 up to
    ``width``; with ``"omit"`` it keeps its natural, variable length.
    """
    slots = as_array(skill_slots) or []
    skill_ids: list[int] = []
    for item in slots:
        slot = as_object(item)
        if slot is None:
            continue
        skill_id = slot.get("_skillHashId")
        if isinstance(skill_id, bool) or not isinstance(skill_id, int):
            continue
        if skill_id == EMPTY_SLOT:
            continue
        skill_ids.append(skill_id)

    skill_ids = skill_ids[:width]
    if padding == "pad":
        skill_ids.extend([0] * (width - len(skill_ids)))
    return skill_ids
