"""react-scaffolding configuration.

Centralised, typed configuration for a scaffolding run. All settings use
Pydantic v2 models so they can be validated at construction time and
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from react_scaffolding.utils import PROJECT_NAME_HINT, PROJECT_NAME_PATTERN


class FeatureSelection(BaseModel):
    """Which optional features to add on top of the base React project.

    Field names double as the feature keys used by the pipeline.
    """

    tailwind: bool = Field(default=True, description="Tailwind CSS")
    shadcn: bool = Field(default=True, description="Shadcn UI (requires Tailwind)")
    redux: bool = Field(default=True, description="Redux Toolkit")
    rtk_query: bool = Field(default=True, description="RTK Query (requires Redux Toolkit)")
    router: bool = Field(default=True, description="React Router")
    i18n: bool = Field(default=True, description="i18next translations")
    react_hook_form: bool = Field(default=True, description="React Hook Form")
    header: bool = Field(default=True, description="Header component")

    def enabled(self) -> list[str]:
        """Return the keys of every selected feature, in declaration order."""
        return [name for name, value in self.model_dump().items() if value]

    def is_enabled(self, key: str) -> bool:
        return bool(getattr(self, key, False))


class Config(BaseModel):
    """Global configuration for one scaffolding run.

    Instances are typically created once by the CLI entry point and then
    passed to ``Pipeline``.
    """

    project_name: str = Field(default="my-react-app")
    output_dir: Path = Field(default=Path("."))
    npm: str = Field(default="npm", description="npm executable")
    npx: str = Field(default="npx", description="npx executable")
    vite_template: str = Field(default="react-ts")
    command_timeout: Optional[int] = Field(
        default=None, ge=1, description="Per-command timeout in seconds (None waits forever)"
    )
    features: FeatureSelection = Field(default_factory=FeatureSelection)

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        if not PROJECT_NAME_PATTERN.match(value):
            raise ValueError(PROJECT_NAME_HINT)
        return value

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def project_path(self) -> Path:
        """Absolute path of the generated project directory."""
        return (self.output_dir / self.project_name).resolve()

    @property
    def app_file(self) -> Path:
        """The application root component (return-style anchor)."""
        return self.project_path / "src" / "App.tsx"

    @property
    def main_file(self) -> Path:
        """The bootstrap entry file (render-style anchor)."""
        return self.project_path / "src" / "main.tsx"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            RSC_PROJECT_NAME, RSC_OUTPUT_DIR, RSC_NPM, RSC_NPX,
            RSC_COMMAND_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("RSC_PROJECT_NAME"):
            kwargs["project_name"] = os.environ["RSC_PROJECT_NAME"]
        if os.environ.get("RSC_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["RSC_OUTPUT_DIR"])
        if os.environ.get("RSC_NPM"):
            kwargs["npm"] = os.environ["RSC_NPM"]
        if os.environ.get("RSC_NPX"):
            kwargs["npx"] = os.environ["RSC_NPX"]
        if os.environ.get("RSC_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["RSC_COMMAND_TIMEOUT"])
        return cls(**kwargs)
