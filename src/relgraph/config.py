from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(RuntimeError):
    """Configuration-related error."""
    pass


# ─────────────────────────────────────────────────────────────
# Section configs
# ─────────────────────────────────────────────────────────────


class LoggingSettings(BaseModel):
    level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "WARNING"
    format: str = "%(asctime)-20s %(name)-30s %(levelname)-8s: %(message)s"


class AlgebraSettings(BaseModel):
    """
    Knobs for the relation algebra.

    Neither setting changes the value produced by any operation; they only
    control diagnostics.
    """

    check_consistency: bool = Field(
        False,
        description=(
            "Run the consistency check on every constructed relation and raise "
            "InconsistentRelationError on failure."
        ),
    )
    product_log_threshold: int = Field(
        100_000,
        description=(
            "connect() logs a debug message when the cartesian product of the "
            "two vertex sets exceeds this many pairs."
        ),
    )

    def validate_threshold(self) -> None:
        if self.product_log_threshold <= 0:
            raise ConfigError(
                f"product_log_threshold must be positive, "
                f"got {self.product_log_threshold}."
            )


# ─────────────────────────────────────────────────────────────
# Top-level settings
# ─────────────────────────────────────────────────────────────


class AppSettings(BaseSettings):
    """
    Canonical configuration for relgraph.

    Precedence (highest → lowest):

    1. Init kwargs (tests/overrides)
    2. Environment variables
    3. .env and .env.local
    4. Defaults in this class
    """

    model_config = SettingsConfigDict(
        env_prefix="RELGRAPH_",  # RELGRAPH_LOGGING__LEVEL, RELGRAPH_ALGEBRA__CHECK_CONSISTENCY, ...
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = LoggingSettings()
    algebra: AlgebraSettings = AlgebraSettings()  # type: ignore[call-arg]


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> AppSettings:
    """
    Cached accessor for process-wide settings.

    `overrides` are init kwargs → highest precedence (handy in tests).
    """
    settings = AppSettings(**overrides)
    settings.algebra.validate_threshold()
    return settings
