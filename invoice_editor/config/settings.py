"""
Configuration Management for the Invoice Editor

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
File extensions, the template location and the currency symbol are
read once and passed to the components that need them.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EditorSettings(BaseSettings):
    """
    Invoice editor settings.

    Loads configuration from ``INVOICE_EDITOR_*`` environment variables
    and a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="INVOICE_EDITOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Export template
    template_path: Optional[Path] = Field(
        default=None,
        description="Default .docx template used for export"
    )
    template_member: str = Field(
        default="word/document.xml",
        description="Archive member holding the document markup"
    )

    # File types
    document_extension: str = Field(
        default=".json",
        description="Extension required when loading a document"
    )
    export_extension: str = Field(
        default=".docx",
        description="Extension of exported invoices"
    )

    # Formatting
    currency_symbol: str = Field(
        default="$",
        description="Symbol used for currency amounts in exported invoices"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Minimum log level"
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of console output"
    )

    @field_validator("document_extension", "export_extension")
    @classmethod
    def normalize_extension(cls, v: str) -> str:
        """Extensions are compared lower-case and always carry the dot."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Extension cannot be empty")
        return v if v.startswith(".") else f".{v}"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return v


@lru_cache()
def get_settings() -> EditorSettings:
    """
    Get editor settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return EditorSettings()
