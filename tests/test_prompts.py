"""Unit tests for the interactive questions (react_scaffolding.prompts)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from react_scaffolding.config import FeatureSelection
from react_scaffolding.prompts import answers_to_config, ask_config, build_questions

pytestmark = pytest.mark.unit


def _question(name: str) -> dict:
    return next(q for q in build_questions() if q["name"] == name)


class TestBuildQuestions:
    def test_order(self):
        assert [q["name"] for q in build_questions()] == [
            "project_name",
            "tailwind",
            "shadcn",
            "redux",
            "rtk_query",
            "router",
            "i18n",
            "react_hook_form",
            "header",
        ]

    def test_project_name_question(self):
        question = build_questions("custom-name")[0]
        assert question["type"] == "text"
        assert question["default"] == "custom-name"
        assert question["validate"]("ok-name") is True
        assert "lowercase" in question["validate"]("Not OK")

    def test_confirms_default_to_yes(self):
        confirms = [q for q in build_questions() if q["type"] == "confirm"]
        assert len(confirms) == 8
        assert all(q["default"] is True for q in confirms)

    @pytest.mark.parametrize("dependent,required", [("shadcn", "tailwind"), ("rtk_query", "redux")])
    def test_dependent_questions(self, dependent, required):
        when = _question(dependent)["when"]
        assert when({required: True}) is True
        assert when({required: False}) is False
        assert when({}) is False

    def test_independent_questions_always_asked(self):
        for name in ("tailwind", "redux", "router", "i18n", "react_hook_form", "header"):
            assert "when" not in _question(name)


class TestAnswersToConfig:
    def test_full_answers(self, tmp_path: Path):
        answers = {"project_name": "shop", **{key: True for key in FeatureSelection.model_fields}}
        config = answers_to_config(answers, output_dir=tmp_path)
        assert config.project_name == "shop"
        assert config.output_dir == tmp_path
        assert config.features == FeatureSelection()

    def test_skipped_dependents_are_declined(self):
        answers = {
            "project_name": "shop",
            "tailwind": False,
            "redux": False,
            "router": True,
            "i18n": True,
            "react_hook_form": False,
            "header": True,
        }
        config = answers_to_config(answers)
        assert config.features.shadcn is False
        assert config.features.rtk_query is False
        assert config.features.enabled() == ["router", "i18n", "header"]

    def test_overrides(self):
        config = answers_to_config({"project_name": "shop"}, npm="pnpm", command_timeout=60)
        assert config.npm == "pnpm"
        assert config.command_timeout == 60

    def test_empty_name_uses_default(self):
        assert answers_to_config({}).project_name == "my-react-app"


class TestAskConfig:
    def test_uses_unsafe_prompt(self, tmp_path: Path):
        answers = {"project_name": "from-prompt", "tailwind": True, "shadcn": False}
        with patch("react_scaffolding.prompts.questionary.unsafe_prompt", return_value=answers) as prompt:
            config = ask_config(default_name="suggested", output_dir=tmp_path)

        questions = prompt.call_args.args[0]
        assert questions[0]["default"] == "suggested"
        assert config.project_name == "from-prompt"
        assert config.features.tailwind is True
        assert config.features.shadcn is False
        assert config.features.redux is False

    def test_ctrl_c_propagates(self):
        with patch(
            "react_scaffolding.prompts.questionary.unsafe_prompt",
            side_effect=KeyboardInterrupt,
        ):
            with pytest.raises(KeyboardInterrupt):
                ask_config()
