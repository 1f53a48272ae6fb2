"""React Hook Form with arktype validation."""

from __future__ import annotations

from pathlib import Path

from react_scaffolding.config import FeatureSelection
from react_scaffolding.utils import print_info, print_step_header, step_status

from .base import Feature, src_path


class ReactHookFormFeature(Feature):
    key = "react_hook_form"
    title = "React Hook Form"
    templates = ("forms/ExampleForm.tsx.j2",)
    hints = (
        "React Hook Form is ready with arktype validation.",
        "See example form in 'src/components/ExampleForm.tsx'.",
    )

    async def setup(self, project_path: Path, selection: FeatureSelection) -> list[Path]:
        print_step_header("Setting up React Hook Form")

        with step_status(
            "Installing React Hook Form and arktype...",
            success="React Hook Form dependencies installed!",
            failure="Failed to install React Hook Form",
        ):
            await self.npm.install(
                project_path, ["react-hook-form", "@hookform/resolvers", "arktype"]
            )

        with step_status(
            "Creating example form component...",
            success="React Hook Form configured successfully!",
            failure="Failed to setup React Hook Form",
        ):
            form = await self.renderer.render_to_file(
                "forms/ExampleForm.tsx.j2",
                src_path(project_path, "components", "ExampleForm.tsx"),
                self.context(project_path.name, selection),
            )

        print_info("  - Example: src/components/ExampleForm.tsx")
        return [form]
