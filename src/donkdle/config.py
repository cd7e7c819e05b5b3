"""Runtime configuration for Donkdle."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="DONKDLE_", env_file=".env", extra="ignore")

    app_name: str = "donkdle"
    log_level: str = "WARNING"
    catalog_path: str | None = Field(
        default=None,
        description="Location catalog JSON; the bundled catalog is used when unset.",
    )
    state_path: str = Field(
        default="~/.donkdle/state.json",
        description="JSON file holding saved daily games and statistics.",
    )
    default_mode: str = "daily"
    autocomplete_limit: int = 15
    min_query_length: int = 2
    max_guesses: int | None = None


settings = Settings()
