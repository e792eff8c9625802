"""Settings file management for Claude Code."""

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import ValidationError

from ..core.constants import (
    BACKUP_SUFFIX,
    CLAUDE_DIR_NAME,
    CLAUDE_JSON_NAME,
    GLOBAL_SETTINGS_FILE_NAME,
    JSON_INDENT,
    LOCAL_SETTINGS_FILE_NAME,
)
from ..models.settings import ProjectRegistry
from ..services.exceptions import BackupError, SettingsParseError, SettingsWriteError

logger = logging.getLogger(__name__)


class SettingsManager:
    """Reads and writes the Claude Code settings files involved in a merge."""

    def __init__(self, home_dir: Optional[Path] = None):
        """Initialize settings manager.

        Args:
            home_dir: Directory holding ``.claude.json`` and ``.claude/``
                (defaults to the user's home directory)
        """
        self.home_dir = home_dir or Path.home()
        self.claude_json_path = self.home_dir / CLAUDE_JSON_NAME
        self.settings_path = self.home_dir / CLAUDE_DIR_NAME / GLOBAL_SETTINGS_FILE_NAME
        self.backup_path = self.settings_path.with_name(GLOBAL_SETTINGS_FILE_NAME + BACKUP_SUFFIX)

    @staticmethod
    def local_settings_path(project_path: str) -> Path:
        """Get the local settings file location for a project."""
        return Path(project_path) / CLAUDE_DIR_NAME / LOCAL_SETTINGS_FILE_NAME

    def _read_json(self, path: Path, description: str) -> Any:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise SettingsParseError(
                f'Failed to read or parse {description} "{path}". '
                f"Please ensure the file exists and contains valid JSON: {e}",
                path=path,
            ) from e

    def load_project_paths(self) -> List[str]:
        """Load registered project paths from ``~/.claude.json``.

        Returns:
            Project root paths in the order they appear in the file

        Raises:
            SettingsParseError: If the file is missing, invalid JSON, or
                its ``projects`` field is not a mapping
        """
        data = self._read_json(self.claude_json_path, "Claude configuration file")
        try:
            registry = ProjectRegistry.model_validate(data)
        except ValidationError as e:
            raise SettingsParseError(
                f'Invalid Claude configuration file "{self.claude_json_path}": {e}',
                path=self.claude_json_path,
            ) from e

        project_paths = registry.project_paths()
        logger.debug("Found %d registered projects", len(project_paths))
        return project_paths

    def load_global_settings(self) -> Dict[str, Any]:
        """Load the global settings used as the merge base.

        Raises:
            SettingsParseError: If the file is missing, invalid JSON, or
                not a JSON object
        """
        data = self._read_json(self.settings_path, "global settings file")
        if not isinstance(data, dict):
            raise SettingsParseError(
                f'Global settings file "{self.settings_path}" must contain a JSON object',
                path=self.settings_path,
            )
        return data

    def load_local_settings(self, project_path: str) -> Optional[Dict[str, Any]]:
        """Load a project's local settings.

        Returns:
            The settings object, or None if the project has no local
            settings file

        Raises:
            SettingsParseError: If the file exists but cannot be parsed
        """
        path = self.local_settings_path(project_path)
        if not path.exists():
            logger.debug("No local settings for %s", project_path)
            return None

        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            raise SettingsParseError(
                f'Failed to parse JSON in local settings file "{path}": {e}',
                path=path,
            ) from e

        if not isinstance(data, dict):
            raise SettingsParseError(
                f'Local settings file "{path}" must contain a JSON object',
                path=path,
            )
        return data

    def load_local_settings_record(
        self, project_paths: Iterable[str]
    ) -> List[Tuple[str, Dict[str, Any]]]:
        """Load local settings for every project that has them.

        Returns:
            Ordered ``(local settings path, settings)`` pairs, in project order
        """
        record = []
        for project_path in project_paths:
            local_settings = self.load_local_settings(project_path)
            if local_settings is None:
                continue
            record.append((str(self.local_settings_path(project_path)), local_settings))
        return record

    def backup_global_settings(self) -> Optional[Path]:
        """Copy the current global settings next to it before overwriting.

        Returns:
            Path of the backup, or None if there was nothing to back up

        Raises:
            BackupError: If the copy fails
        """
        if not self.settings_path.exists():
            return None

        try:
            shutil.copy2(self.settings_path, self.backup_path)
        except OSError as e:
            raise BackupError(
                f'Failed to back up global settings "{self.settings_path}" '
                f'to "{self.backup_path}": {e}',
                path=self.backup_path,
            ) from e

        logger.info("Backed up global settings to %s", self.backup_path)
        return self.backup_path

    def write_global_settings(self, settings: Dict[str, Any]) -> None:
        """Write merged settings back to the global settings file.

        A symlinked settings file is written through to its target, and the
        existing file mode is kept.

        Raises:
            SettingsWriteError: If the file cannot be written
        """
        target = self.settings_path.resolve()
        temp_path = None
        try:
            # Write to temp file first (atomic write pattern)
            with tempfile.NamedTemporaryFile(
                mode='w',
                dir=target.parent,
                prefix="settings_",
                suffix=".tmp",
                delete=False,
                encoding='utf-8',
            ) as tmp_file:
                temp_path = Path(tmp_file.name)
                tmp_file.write(json.dumps(settings, indent=JSON_INDENT, ensure_ascii=False) + "\n")
                tmp_file.flush()
            if target.exists():
                shutil.copymode(target, temp_path)
            else:
                # New files get the usual umask-based mode, not the temp file's 0600
                umask = os.umask(0)
                os.umask(umask)
                os.chmod(temp_path, 0o666 & ~umask)
            temp_path.replace(target)
        except (OSError, TypeError, ValueError) as e:
            # Clean up temp file on failure
            if temp_path is not None and temp_path.exists():
                temp_path.unlink()
            raise SettingsWriteError(
                f'Failed to write merged settings to "{self.settings_path}". '
                "Please check file permissions, available disk space, "
                f"and that the directory exists: {e}",
                path=self.settings_path,
            ) from e

        logger.info("Wrote merged settings to %s", self.settings_path)
