"""
Shared settings base.

Every knowledge base settings class reads the same `.env` file with
case-insensitive keys and ignores variables it does not declare.

Dependencies: pydantic_settings
System role: Common parent of the configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings parent carrying the log level used by the API and the batch job."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level applied by configure_logging",
    )
