import json
import pytest
from click.testing import CliRunner
from pathlib import Path


def _write_json(path: Path, data) -> Path:
    """Write JSON data, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2))
    return path


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def home_dir(tmp_path):
    """Creates a temporary home directory with a .claude settings directory."""
    home = tmp_path / "home"
    (home / ".claude").mkdir(parents=True)
    return home


@pytest.fixture
def claude_home(home_dir, tmp_path):
    """Creates a home directory with two registered projects.

    Only the first two projects have local settings; the third is registered
    but has never been configured.
    """
    projects_dir = tmp_path / "projects"
    project_a = projects_dir / "a"
    project_b = projects_dir / "b"
    project_c = projects_dir / "c"
    for project in (project_a, project_b, project_c):
        project.mkdir(parents=True)

    _write_json(home_dir / ".claude.json", {
        "numStartups": 3,
        "projects": {
            str(project_a): {"allowedTools": []},
            str(project_b): {"allowedTools": []},
            str(project_c): {"allowedTools": []},
        },
    })
    _write_json(home_dir / ".claude" / "settings.json", {
        "model": "sonnet",
        "permissions": {"allow": ["Bash(ls:*)"], "deny": ["Bash(rm:*)"]},
    })
    _write_json(project_a / ".claude" / "settings.local.json", {
        "permissions": {"allow": ["Bash(npm test:*)", "Bash(ls:*)"]},
    })
    _write_json(project_b / ".claude" / "settings.local.json", {
        "model": "opus",
        "permissions": {"allow": ["Bash(git status:*)"], "ask": ["WebFetch"]},
    })

    return {
        "home": home_dir,
        "projects": [project_a, project_b, project_c],
    }


@pytest.fixture
def write_json():
    """Provides a helper that writes JSON files, creating parent directories."""
    return _write_json
