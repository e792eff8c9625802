"""Allow running as ``python -m claude_settings_merge``."""

from .cli.main import cli


if __name__ == '__main__':
    cli()
