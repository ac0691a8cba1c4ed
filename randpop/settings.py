"""Configuration via pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Collections — lengths are drawn uniformly from [1, max_collection_size]
    max_collection_size: int = Field(default=3, ge=1)

    # Composite nesting — None means unbounded (the cycle gate still terminates)
    max_depth: int | None = Field(default=None, ge=1)

    # Write a WARNING line when a nested type can't be constructed
    log_failures: bool = True

    model_config = {"env_prefix": "RANDPOP_", "env_file": ".env", "extra": "ignore"}


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return a cached singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
