"""React Router: pages, a public layout, routes in ``App.tsx`` and the ``<Router>`` wrap."""

from __future__ import annotations

from pathlib import Path

from react_scaffolding.config import FeatureSelection
from react_scaffolding.injector import AnchorStyle
from react_scaffolding.utils import print_info, print_step_header, step_status

from .base import Feature, src_path

ROUTER_IMPORT = "import { BrowserRouter as Router } from 'react-router';"

# component, translation key, fallback text
PAGES: tuple[tuple[str, str, str], ...] = (
    ("Home", "home_message", "Welcome to your React app with routing!"),
    ("About", "about_message", "This is the About page."),
)


class RouterFeature(Feature):
    key = "router"
    title = "React Router"
    templates = ("router/page.tsx.j2", "router/PublicLayout.tsx.j2", "router/App.tsx.j2")
    hints = (
        "React Router is configured with sample routes.",
        "Edit 'src/App.tsx' to add routes.",
    )

    async def setup(self, project_path: Path, selection: FeatureSelection) -> list[Path]:
        print_step_header("Setting up React Router")
        ctx = self.context(project_path.name, selection)

        with step_status(
            "Installing React Router...",
            success="React Router installed!",
            failure="Failed to install React Router",
        ):
            await self.npm.install(project_path, ["react-router"])

        with step_status(
            "Creating routes and pages...",
            success="React Router configured successfully!",
            failure="Failed to setup React Router",
        ) as status:
            written: list[Path] = []
            for component, message_key, message in PAGES:
                page_ctx = {
                    **ctx,
                    "component": component,
                    "message_key": message_key,
                    "message": message,
                }
                written.append(
                    await self.renderer.render_to_file(
                        "router/page.tsx.j2",
                        src_path(project_path, "pages", f"{component}.tsx"),
                        page_ctx,
                    )
                )

            written.append(
                await self.renderer.render_to_file(
                    "router/PublicLayout.tsx.j2",
                    src_path(project_path, "components", "Layout", "PublicLayout.tsx"),
                    ctx,
                )
            )
            written.append(
                await self.renderer.render_to_file(
                    "router/App.tsx.j2", src_path(project_path, "App.tsx"), ctx
                )
            )

            status.update("Wrapping App with Router...")
            main_file = src_path(project_path, "main.tsx")
            await self.injector.wrap(main_file, AnchorStyle.RENDER, "Router", ROUTER_IMPORT)
            written.append(main_file)

        print_info("  - Pages: src/pages/")
        print_info("  - Layout: src/components/Layout/PublicLayout.tsx")
        return written
