# src/tagtally/errors.py
from __future__ import annotations


class TagTallyError(Exception):
    """Base exception for all tagtally errors."""

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigError(TagTallyError):
    """Raised when config is missing or invalid."""


class MissingSettingError(ConfigError):
    """Raised when a required configuration value is absent."""

    def __init__(self, setting_name: str, message: str | None = None) -> None:
        detail = message or f"Missing required setting: {setting_name}"
        super().__init__(
            detail,
            hint=f"Set `{setting_name}` in the config file or pass it on the command line.",
        )
        self.setting_name = setting_name


class RepositoryError(TagTallyError):
    """Base error for repository related failures."""


class ContentTypeNotFoundError(RepositoryError):
    """Raised when a content type does not resolve to a directory."""


class ContentReadError(RepositoryError):
    """Raised when a content document cannot be read."""
