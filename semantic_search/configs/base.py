"""
Shared settings base for the retrieval service.

Every settings class reads the same ``.env`` file and ignores unknown
keys; each subclass narrows the variables it reads with its own prefix.

Dependencies: pydantic_settings
System role: Common parent of the per-concern settings classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings parent carrying the process log level."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level applied at startup (DEBUG, INFO, WARNING, ERROR)",
    )
