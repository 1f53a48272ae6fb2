"""npm / npx process management.

Thin async wrapper over ``run_command`` for the package manager and the
generator CLIs the feature steps shell out to.  Child processes inherit the
terminal's streams so npm's own progress output stays visible; any non-zero
exit raises ``CommandFailedError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from react_scaffolding.errors import CommandFailedError
from react_scaffolding.utils import run_command


class NpmClient:
    """Runs npm and npx inside a project directory."""

    def __init__(
        self,
        npm: str = "npm",
        npx: str = "npx",
        timeout: Optional[int] = None,
    ) -> None:
        self.npm = npm
        self.npx = npx
        self.timeout = timeout

    async def run(
        self,
        cmd: list[str],
        cwd: str | Path,
        env: dict[str, str] | None = None,
    ) -> None:
        """Run *cmd* in *cwd* and raise if it exits non-zero."""
        returncode, _, stderr = await run_command(
            cmd, cwd=cwd, timeout=self.timeout, capture=False, env=env
        )
        if returncode != 0:
            raise CommandFailedError(cmd, returncode, stderr)

    async def install(
        self,
        project_path: str | Path,
        packages: list[str] | None = None,
        *,
        dev: bool = False,
    ) -> None:
        """``npm install [-D] <packages>``; with no packages installs the lockfile."""
        cmd = [self.npm, "install"]
        if packages:
            if dev:
                cmd.append("-D")
            cmd.extend(packages)
        await self.run(cmd, project_path)

    async def exec(self, project_path: str | Path, *args: str) -> None:
        """``npx <args>`` inside the project, e.g. ``shadcn@latest add button``."""
        await self.run([self.npx, *args], project_path)

    async def create_vite(
        self,
        parent_dir: str | Path,
        project_name: str,
        template: str = "react-ts",
    ) -> None:
        """Create a Vite project non-interactively under *parent_dir*."""
        cmd = [
            self.npm, "create", "vite@latest", project_name,
            "--", "--template", template, "-y",
        ]
        await self.run(cmd, parent_dir, env={"CI": "true"})
