"""
Retrieval configuration settings.

Dependencies: pydantic_settings
System role: Query-time search limits
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrievalSettings(BaseSettings):
    """Vector search configuration."""

    model_config = SettingsConfigDict(
        env_prefix="KB_SEARCH_",
        case_sensitive=False,
        extra="ignore",
    )

    default_limit: int = Field(default=5, description="Results returned when no limit is given")
    max_limit: int = Field(default=50, description="Upper bound accepted for a query limit")
