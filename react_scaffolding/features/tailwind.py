"""Tailwind CSS v4 through the official Vite plugin."""

from __future__ import annotations

from pathlib import Path

from react_scaffolding.config import FeatureSelection
from react_scaffolding.utils import print_step_header, step_status

from .base import Feature, src_path


class TailwindFeature(Feature):
    key = "tailwind"
    title = "Tailwind CSS"
    templates = (
        "tailwind/tailwind.config.js.j2",
        "tailwind/vite.config.ts.j2",
        "tailwind/index.css.j2",
    )

    async def setup(self, project_path: Path, selection: FeatureSelection) -> list[Path]:
        print_step_header("Setting up Tailwind CSS")
        ctx = self.context(project_path.name, selection)

        with step_status(
            "Installing Tailwind CSS dependencies...",
            success="Tailwind CSS dependencies installed!",
            failure="Failed to install Tailwind CSS",
        ):
            await self.npm.install(project_path, ["tailwindcss", "@tailwindcss/vite"])
            await self.npm.install(project_path, ["tw-animate-css"], dev=True)

        with step_status(
            "Creating Tailwind configuration...",
            success="Tailwind CSS configured successfully!",
            failure="Failed to setup Tailwind CSS",
        ) as status:
            written = [
                await self.renderer.render_to_file(
                    "tailwind/tailwind.config.js.j2", project_path / "tailwind.config.js", ctx
                ),
                await self.renderer.render_to_file(
                    "tailwind/vite.config.ts.j2", project_path / "vite.config.ts", ctx
                ),
            ]
            status.update("Updating CSS files...")
            written.append(
                await self.renderer.render_to_file(
                    "tailwind/index.css.j2", src_path(project_path, "index.css"), ctx
                )
            )
        return written
