"""Tests for settings exceptions."""

from pathlib import Path

import pytest

from claude_settings_merge.services import (
    BackupError,
    SettingsError,
    SettingsParseError,
    SettingsWriteError,
)


@pytest.mark.parametrize("error_class", [SettingsParseError, SettingsWriteError, BackupError])
def test_errors_share_base(error_class):
    error = error_class("boom", path=Path("/tmp/settings.json"))
    assert isinstance(error, SettingsError)
    assert str(error) == "boom"
    assert error.path == Path("/tmp/settings.json")


def test_path_is_optional():
    assert SettingsError("boom").path is None
