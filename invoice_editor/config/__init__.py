"""Configuration package."""

from invoice_editor.config.settings import EditorSettings, get_settings

__all__ = [
    "EditorSettings",
    "get_settings",
]
