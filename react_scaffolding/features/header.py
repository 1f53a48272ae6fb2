"""Header component wired into whichever layout the project has.

With the router step the header is spliced into ``PublicLayout.tsx``;
otherwise an ``AppLayout`` component is generated and ``App.tsx``'s return
expression is wrapped in it.
"""

from __future__ import annotations

from pathlib import Path

from react_scaffolding.config import FeatureSelection
from react_scaffolding.injector import AnchorStyle
from react_scaffolding.utils import print_info, print_step_header, print_warning, step_status

from .base import Feature, src_path

HEADER_IMPORT = "import Header from './Header';"
TRANSLATION_IMPORT = 'import { useTranslation } from "react-i18next";'
APP_LAYOUT_IMPORT = "import AppLayout from './components/Layout/AppLayout';"

LAYOUT_SIGNATURE = "export default function PublicLayout() {"
LAYOUT_OPENER = '<div className="h-screen overflow-x-hidden flex flex-col">'
LANGUAGE_HOOK = "\n  const { i18n } = useTranslation();\n"
HEADER_WITH_LANGUAGE = (
    "\n      <Header"
    "\n        currentLanguage={i18n.language}"
    "\n        handleLanguageChange={(lang: string) => i18n.changeLanguage(lang)}"
    "\n      />"
)
HEADER_PLAIN = "\n      <Header />"


class HeaderFeature(Feature):
    key = "header"
    title = "Header"
    templates = ("header/Header.tsx.j2", "header/AppLayout.tsx.j2")
    hints = ("A header with navigation is included in the layout.",)

    async def setup(self, project_path: Path, selection: FeatureSelection) -> list[Path]:
        print_step_header("Setting up Header component")
        ctx = self.context(project_path.name, selection)

        if selection.i18n and selection.shadcn:
            # The language picker uses shadcn's Select; the CLI prompts, so no spinner.
            print_info("Adding shadcn select component...")
            await self.npm.exec(project_path, "shadcn@latest", "add", "select")

        with step_status(
            "Creating Header component...",
            success="Header component configured successfully!",
            failure="Failed to setup Header component",
        ) as status:
            header = await self.renderer.render_to_file(
                "header/Header.tsx.j2",
                src_path(project_path, "components", "Layout", "Header.tsx"),
                ctx,
            )
            written = [header]

            layout = src_path(project_path, "components", "Layout", "PublicLayout.tsx")
            if layout.exists():
                status.update("Adding Header to PublicLayout...")
                written.append(await self._splice_into_layout(layout, selection.i18n))
            else:
                status.update("Wrapping App with AppLayout...")
                written.append(
                    await self.renderer.render_to_file(
                        "header/AppLayout.tsx.j2",
                        src_path(project_path, "components", "Layout", "AppLayout.tsx"),
                        ctx,
                    )
                )
                app_file = src_path(project_path, "App.tsx")
                await self.injector.wrap(
                    app_file, AnchorStyle.RETURN, "AppLayout", APP_LAYOUT_IMPORT
                )
                written.append(app_file)

        print_info("  - Header: src/components/Layout/Header.tsx")
        return written

    async def _splice_into_layout(self, layout: Path, with_language: bool) -> Path:
        await self.injector.add_import(layout, HEADER_IMPORT)
        if with_language:
            await self.injector.add_import(layout, TRANSLATION_IMPORT)
            hooked = await self.injector.replace_in_file(
                layout, LAYOUT_SIGNATURE, LAYOUT_SIGNATURE + LANGUAGE_HOOK
            )
            placed = await self.injector.replace_in_file(
                layout, LAYOUT_OPENER, LAYOUT_OPENER + HEADER_WITH_LANGUAGE
            )
            spliced = hooked and placed
        else:
            spliced = await self.injector.replace_in_file(
                layout, LAYOUT_OPENER, LAYOUT_OPENER + HEADER_PLAIN
            )

        if not spliced:
            print_warning(f"Could not place <Header /> in {layout.name}; add it manually.")
        return layout
