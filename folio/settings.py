"""Configuration management for Folio using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROJECT_TOOLS = [
    "get_docs: Retrieve documentation (table of contents, a section by title, or a numbered page)",
]


class FolioSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FOLIO_",
        case_sensitive=False,
        extra="ignore",
    )

    # Documentation source
    docs_base_url: str = Field(
        default="https://docs.vendure.io",
        description="Base URL serving llms.txt and llms-full.txt",
    )

    # Cache settings
    cache_dir: str = Field(
        default=".folio-docs-cache",
        description="Disk cache directory, relative to the working directory unless absolute",
    )
    cache_ttl_hours: int = Field(
        default=24,
        gt=0,
        description="Hours before a cached document is considered stale",
    )

    # Pagination
    default_page_size: int = Field(
        default=5000,
        gt=0,
        description="Lines per page when the caller does not pass page_size",
    )

    # Project context
    project_path: str = Field(
        default="",
        description="Project path prepended to the full documentation (empty = no project context)",
    )
    project_tools: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PROJECT_TOOLS),
        description="Tool lines listed in the project context header",
    )


folio_settings = FolioSettings()
