DEFAULT_CHARACTER_NAME = "Fallen Hero"
MAX_CHARACTER_NAME_LENGTH = 20


def sanitize_character_name(
    raw_name: str | None,
    max_length: int = MAX_CHARACTER_NAME_LENGTH,
    default: str = DEFAULT_CHARACTER_NAME,
) -> str:
    """Trim and truncate a user-chosen name, falling back to ``default``."""
    name = (raw_name or "").strip()[:max_length].strip()
    return name or default[:max_length]
