"""Service layer exceptions for Claude Settings Merge."""

from .exceptions import (
    BackupError,
    SettingsError,
    SettingsParseError,
    SettingsWriteError,
)

__all__ = [
    'SettingsError',
    'SettingsParseError',
    'SettingsWriteError',
    'BackupError'
]
