"""Utilities for Claude Settings Merge."""

from .settings_manager import SettingsManager

__all__ = [
    'SettingsManager'
]
