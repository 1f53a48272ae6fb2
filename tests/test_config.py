"""Unit tests for Config and FeatureSelection (react_scaffolding.config).

Tests cover:
- FeatureSelection defaults, enabled(), is_enabled()
- Config defaults, project-name validation, derived paths
- Config save/load round trip and from_env
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from react_scaffolding.config import Config, FeatureSelection


# ---------------------------------------------------------------------------
# FeatureSelection
# ---------------------------------------------------------------------------


class TestFeatureSelection:
    @pytest.mark.unit
    def test_everything_enabled_by_default(self):
        selection = FeatureSelection()
        assert selection.enabled() == [
            "tailwind",
            "shadcn",
            "redux",
            "rtk_query",
            "router",
            "i18n",
            "react_hook_form",
            "header",
        ]

    @pytest.mark.unit
    def test_enabled_subset(self):
        selection = FeatureSelection(tailwind=False, shadcn=False, header=False)
        assert "tailwind" not in selection.enabled()
        assert "redux" in selection.enabled()

    @pytest.mark.unit
    def test_is_enabled(self):
        selection = FeatureSelection(redux=False)
        assert selection.is_enabled("router") is True
        assert selection.is_enabled("redux") is False
        assert selection.is_enabled("nonexistent") is False


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.project_name == "my-react-app"
        assert config.output_dir == Path(".")
        assert config.npm == "npm"
        assert config.npx == "npx"
        assert config.vite_template == "react-ts"
        assert config.command_timeout is None
        assert config.features == FeatureSelection()

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["my-app", "app_2", "a", "0-9_x"])
    def test_valid_project_names(self, name):
        assert Config(project_name=name).project_name == name

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["My-App", "my app", "", "app!", "ünïcode"])
    def test_invalid_project_names(self, name):
        with pytest.raises(ValidationError, match="lowercase letters"):
            Config(project_name=name)

    @pytest.mark.unit
    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Config(command_timeout=0)

    @pytest.mark.unit
    def test_derived_paths(self, tmp_path: Path):
        config = Config(project_name="demo", output_dir=tmp_path)
        assert config.project_path == (tmp_path / "demo").resolve()
        assert config.app_file == config.project_path / "src" / "App.tsx"
        assert config.main_file == config.project_path / "src" / "main.tsx"

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        original = Config(
            project_name="saved-app",
            output_dir=tmp_path,
            command_timeout=120,
            features=FeatureSelection(i18n=False),
        )
        path = original.save(tmp_path / "nested" / "answers.json")
        assert path.is_file()
        assert json.loads(path.read_text(encoding="utf-8"))["features"]["i18n"] is False

        loaded = Config.load(path)
        assert loaded == original

    @pytest.mark.unit
    def test_load_rejects_bad_name(self, tmp_path: Path):
        path = tmp_path / "answers.json"
        path.write_text(json.dumps({"project_name": "Bad Name"}), encoding="utf-8")
        with pytest.raises(ValidationError):
            Config.load(path)

    @pytest.mark.unit
    def test_from_env(self, tmp_path: Path):
        env = {
            "RSC_PROJECT_NAME": "env-app",
            "RSC_OUTPUT_DIR": str(tmp_path),
            "RSC_NPM": "pnpm",
            "RSC_NPX": "pnpx",
            "RSC_COMMAND_TIMEOUT": "300",
        }
        with patch.dict(os.environ, env, clear=False):
            config = Config.from_env()
        assert config.project_name == "env-app"
        assert config.output_dir == tmp_path
        assert config.npm == "pnpm"
        assert config.npx == "pnpx"
        assert config.command_timeout == 300

    @pytest.mark.unit
    def test_from_env_defaults(self):
        cleared = {key: "" for key in (
            "RSC_PROJECT_NAME", "RSC_OUTPUT_DIR", "RSC_NPM", "RSC_NPX", "RSC_COMMAND_TIMEOUT",
        )}
        with patch.dict(os.environ, cleared, clear=False):
            config = Config.from_env()
        assert config == Config()
