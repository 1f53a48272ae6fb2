"""Base project creation.

Creates the Vite ``react-ts`` project every feature step builds on and
installs its dependencies.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from react_scaffolding.config import Config
from react_scaffolding.errors import FilesystemError, ScaffoldError
from react_scaffolding.utils import ensure_dir, step_status

from .npm import NpmClient


class ProjectGenerator:
    """Creates the base React + TypeScript project with Vite."""

    def __init__(self, config: Config, npm: NpmClient) -> None:
        self.config = config
        self.npm = npm

    async def generate(self) -> Path:
        """Create the project and return its absolute path.

        Raises:
            ScaffoldError: If the target directory already holds files.
            CommandFailedError: If ``npm create vite`` or ``npm install`` fails.
            FilesystemError: If Vite did not produce the expected entry files.
        """
        project_path = self.config.project_path
        if await asyncio.to_thread(_has_entries, project_path):
            raise ScaffoldError(f"Directory {project_path} already exists and is not empty")

        parent = await asyncio.to_thread(ensure_dir, self.config.output_dir)

        with step_status(
            "Creating React app with TypeScript...",
            success="React app created successfully!",
            failure="Failed to create React app",
        ) as status:
            await self.npm.create_vite(
                parent, self.config.project_name, self.config.vite_template
            )
            status.update("Installing dependencies...")
            await self.npm.install(project_path)

        for required in (self.config.app_file, self.config.main_file):
            if not required.is_file():
                raise FilesystemError(required, "expected file was not generated by Vite")

        return project_path


def _has_entries(path: Path) -> bool:
    return path.is_dir() and any(path.iterdir())
