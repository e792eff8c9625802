"""Custom exceptions for settings file operations."""

from pathlib import Path
from typing import Optional


class SettingsError(Exception):
    """Base exception for all settings-related errors."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class SettingsParseError(SettingsError):
    """Exception raised when a settings file cannot be read or parsed."""

    pass


class SettingsWriteError(SettingsError):
    """Exception raised when merged settings cannot be written."""

    pass


class BackupError(SettingsError):
    """Exception raised when the global settings cannot be backed up."""

    pass
