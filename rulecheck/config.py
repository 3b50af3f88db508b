"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Validation settings loaded from RULECHECK_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Rule registration
    STRICT_RULE_KINDS: bool = False

    # Validation policy
    FAIL_FAST: bool = False
    VALIDATE_NESTED: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "RULECHECK_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
