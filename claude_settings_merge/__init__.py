"""Claude Settings Merge - Consolidate per-project Claude Code permissions into global settings."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
