"""Constants used throughout the Claude Settings Merge application."""


# Root Claude Code configuration, relative to the home directory.
# Its "projects" mapping lists every registered project root.
CLAUDE_JSON_NAME = ".claude.json"

# Settings directory, both under the home directory and under each project
CLAUDE_DIR_NAME = ".claude"

# Global settings file (merge base and destination)
GLOBAL_SETTINGS_FILE_NAME = "settings.json"

# Per-project local settings file
LOCAL_SETTINGS_FILE_NAME = "settings.local.json"

# Backup of the previous global settings, written next to it
BACKUP_SUFFIX = ".backup"

# Reserved settings key and the permission kind reported in the audit trail
PERMISSIONS_KEY = "permissions"
ALLOW_KIND = "allow"

# JSON output formatting
JSON_INDENT = 2
