from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "graveyard"
    db_username: str = "graveyard"
    db_password: str = "secret"

    field_policy_version: str = "v2"
    loadout_padding: Literal["omit", "pad"] = "omit"
    loadout_width: int = Field(default=5, ge=1)
    require_top_level_fields: bool = True
    reject_scientific_notation: bool = True

    level_cap: int = 50
    max_character_name_length: int = Field(default=20, ge=1)
    default_character_name: str = "Fallen Hero"
