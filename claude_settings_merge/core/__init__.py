"""Core functionality for Claude Settings Merge."""

from .merge import is_permission_list, merge_settings

__all__ = [
    'is_permission_list',
    'merge_settings'
]
