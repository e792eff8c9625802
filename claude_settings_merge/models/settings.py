"""Settings models for Claude Settings Merge."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProjectRegistry(BaseModel):
    """Root Claude Code configuration (``~/.claude.json``).

    Only the ``projects`` mapping is interpreted; its keys are project root
    paths. Every other field is kept but ignored.
    """

    projects: Optional[Dict[str, Any]] = Field(
        default_factory=dict, description="Map of project root path to project state"
    )

    model_config = ConfigDict(extra="allow")

    def project_paths(self) -> List[str]:
        """Get project root paths in document order."""
        return list(self.projects or {})


@dataclass
class MergeSettingsResult:
    """Result of merging local settings into global settings."""

    settings: Dict[str, Any]
    merged_allow_commands: List[str] = field(default_factory=list)
