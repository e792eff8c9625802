"""Models for Claude Settings Merge."""

from .settings import MergeSettingsResult, ProjectRegistry

__all__ = [
    'MergeSettingsResult',
    'ProjectRegistry'
]
