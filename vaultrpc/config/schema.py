"""Configuration schema using Pydantic.

Persisted to ~/.vaultrpc/config.json. Without a file, fields are read from the
environment, e.g. VAULTRPC_IDS__SOURCE=sequential.
"""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IdsConfig(BaseModel):
    """Correlation id generation for outgoing requests."""
    source: Literal["secure", "sequential"] = "secure"
    start: int = Field(default=0, ge=0, le=0xFFFFFFFF)  # First id of the sequential source


class LoggingConfig(BaseModel):
    """Library log output."""
    enabled: bool = False
    level: str = "INFO"
    log_payloads: bool = False  # Log full wire text at TRACE (contains signatures and transactions)
    file: str | None = None  # Optional rotating log file


class Config(BaseSettings):
    """Root configuration for vaultrpc."""
    ids: IdsConfig = Field(default_factory=IdsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="VAULTRPC_",
        env_nested_delimiter="__",
    )
