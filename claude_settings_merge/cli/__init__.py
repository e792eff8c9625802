"""Command-line interface for Claude Settings Merge."""
