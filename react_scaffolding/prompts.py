"""Interactive question sequence.

The questions are asked in a fixed order.  Shadcn UI is only offered once
Tailwind CSS was accepted and RTK Query only once Redux Toolkit was, so an
unanswered dependent question counts as "no".
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import questionary

from react_scaffolding.config import Config, FeatureSelection
from react_scaffolding.utils import validate_project_name

DEFAULT_PROJECT_NAME = "my-react-app"


def _accepted(key: str) -> Callable[[dict[str, Any]], bool]:
    return lambda answers: bool(answers.get(key))


def build_questions(default_name: str = DEFAULT_PROJECT_NAME) -> list[dict[str, Any]]:
    """Return the questionary question dicts, in asking order."""
    return [
        {
            "type": "text",
            "name": "project_name",
            "message": "What is your project name?",
            "default": default_name,
            "validate": validate_project_name,
        },
        {
            "type": "confirm",
            "name": "tailwind",
            "message": "Would you like to add Tailwind CSS?",
            "default": True,
        },
        {
            "type": "confirm",
            "name": "shadcn",
            "message": "Would you like to add Shadcn UI? (requires Tailwind)",
            "default": True,
            "when": _accepted("tailwind"),
        },
        {
            "type": "confirm",
            "name": "redux",
            "message": "Would you like to add Redux Toolkit?",
            "default": True,
        },
        {
            "type": "confirm",
            "name": "rtk_query",
            "message": "Would you like to add RTK Query? (requires Redux Toolkit)",
            "default": True,
            "when": _accepted("redux"),
        },
        {
            "type": "confirm",
            "name": "router",
            "message": "Would you like to add React Router?",
            "default": True,
        },
        {
            "type": "confirm",
            "name": "i18n",
            "message": "Would you like to add i18next for translations?",
            "default": True,
        },
        {
            "type": "confirm",
            "name": "react_hook_form",
            "message": "Would you like to add React Hook Form with arktype?",
            "default": True,
        },
        {
            "type": "confirm",
            "name": "header",
            "message": "Would you like to add a Header component?",
            "default": True,
        },
    ]


def answers_to_config(answers: dict[str, Any], output_dir: Path = Path("."), **overrides: Any) -> Config:
    """Turn a questionary answers dict into a validated ``Config``.

    Feature keys missing from *answers* (skipped dependent questions) are
    treated as declined.
    """
    selection = FeatureSelection(
        **{key: bool(answers.get(key, False)) for key in FeatureSelection.model_fields}
    )
    return Config(
        project_name=answers.get("project_name") or DEFAULT_PROJECT_NAME,
        output_dir=output_dir,
        features=selection,
        **overrides,
    )


def ask_config(
    default_name: str = DEFAULT_PROJECT_NAME,
    output_dir: Path = Path("."),
    **overrides: Any,
) -> Config:
    """Ask every question and build the run configuration.

    ``unsafe_prompt`` lets Ctrl-C propagate as ``KeyboardInterrupt`` instead
    of returning an empty answer set.
    """
    answers = questionary.unsafe_prompt(build_questions(default_name))
    return answers_to_config(answers, output_dir=output_dir, **overrides)
