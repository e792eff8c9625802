"""Tests for settings models."""

import warnings

import pytest
from pydantic import ValidationError

from claude_settings_merge.models.settings import MergeSettingsResult, ProjectRegistry


class TestProjectRegistry:
    """Test ProjectRegistry model."""

    def test_project_paths_in_document_order(self):
        registry = ProjectRegistry.model_validate({
            "projects": {"/z/last": {}, "/a/first": {}, "/m/middle": {}},
        })
        assert registry.project_paths() == ["/z/last", "/a/first", "/m/middle"]

    def test_missing_projects(self):
        registry = ProjectRegistry.model_validate({"numStartups": 12})
        assert registry.project_paths() == []

    def test_null_projects(self):
        registry = ProjectRegistry.model_validate({"projects": None})
        assert registry.project_paths() == []

    def test_extra_fields_allowed(self):
        registry = ProjectRegistry.model_validate({
            "projects": {"/p": {"allowedTools": []}},
            "userID": "abc",
        })
        assert registry.project_paths() == ["/p"]

    @pytest.mark.parametrize("data", [
        {"projects": ["/p1", "/p2"]},
        {"projects": "/p1"},
        ["/p1"],
    ])
    def test_invalid_shapes(self, data):
        with pytest.raises(ValidationError):
            ProjectRegistry.model_validate(data)


class TestMergeSettingsResult:
    """Test MergeSettingsResult dataclass."""

    def test_defaults(self):
        result = MergeSettingsResult(settings={"foo": "bar"})
        assert result.settings == {"foo": "bar"}
        assert result.merged_allow_commands == []


def test_project_registry_has_no_deprecated_config():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        registry = ProjectRegistry.model_validate({"projects": {"/p": {}}, "userID": "abc"})
    assert registry.model_config["extra"] == "allow"
