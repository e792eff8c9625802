"""Main CLI entry point for Claude Settings Merge."""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from .. import __version__
from ..core.constants import JSON_INDENT
from ..core.merge import merge_settings
from ..services.exceptions import SettingsError
from ..utils.settings_manager import SettingsManager

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout stays machine-readable."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@click.command()
@click.version_option(version=__version__, prog_name='claude-settings-merge')
@click.option('--show-allow-commands', is_flag=True,
              help='Display allowed commands to stdout (for debugging)')
@click.option('--no-backup', is_flag=True,
              help='Do not back up the global settings before overwriting them')
@click.option('--dry-run', is_flag=True,
              help='Print the merged settings instead of writing them '
                   '(cannot be combined with --show-allow-commands)')
@click.option('--home', 'home_dir', type=click.Path(file_okay=False, path_type=Path),
              help='Directory to use instead of the home directory')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, show_allow_commands: bool, no_backup: bool, dry_run: bool, home_dir, verbose: bool):
    """Merge Claude Code project settings into the global settings.

    Reads ~/.claude/settings.json as the base, merges every registered
    project's .claude/settings.local.json into it (projects are taken from
    ~/.claude.json), and writes the result back to ~/.claude/settings.json.

    Permission lists are combined, de-duplicated and sorted; other fields
    are overwritten by later projects.
    """
    if dry_run and show_allow_commands:
        raise click.UsageError("--dry-run and --show-allow-commands cannot be used together")

    setup_logging(verbose)
    console = Console(stderr=True)
    manager = SettingsManager(home_dir)

    try:
        project_paths = manager.load_project_paths()
        settings = manager.load_global_settings()
        local_settings_record = manager.load_local_settings_record(project_paths)

        result = merge_settings(settings, local_settings_record, show_allow_commands)

        for line in result.merged_allow_commands:
            click.echo(line)

        if dry_run:
            click.echo(json.dumps(result.settings, indent=JSON_INDENT, ensure_ascii=False))
            return

        if not no_backup:
            manager.backup_global_settings()
        manager.write_global_settings(result.settings)
        logger.debug("Merged %d local settings files", len(local_settings_record))
    except SettingsError as e:
        console.print(str(e), style="red", markup=False, highlight=False, soft_wrap=True)
        ctx.exit(1)


if __name__ == '__main__':
    cli()
