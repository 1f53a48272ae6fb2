"""i18next with English and French translation files."""

from __future__ import annotations

from pathlib import Path

from react_scaffolding.config import FeatureSelection
from react_scaffolding.utils import print_info, print_step_header, step_status

from .base import Feature, src_path

I18N_IMPORT = "import './i18n';"
LANGUAGES: tuple[str, ...] = ("en", "fr")
FALLBACK_LANGUAGE = "en"


class I18nFeature(Feature):
    key = "i18n"
    title = "i18next"
    templates = (
        *(f"i18n/global.{lang}.json.j2" for lang in LANGUAGES),
        "i18n/i18n.ts.j2",
    )
    hints = (
        "i18next is configured with English and French translations.",
        "Add translations in 'src/assets/languages/[lang]/global.json'.",
    )

    async def setup(self, project_path: Path, selection: FeatureSelection) -> list[Path]:
        print_step_header("Setting up i18next for translations")
        ctx = self.context(
            project_path.name, selection, fallback_language=FALLBACK_LANGUAGE
        )

        with step_status(
            "Installing i18next dependencies...",
            success="i18next dependencies installed!",
            failure="Failed to install i18next",
        ):
            await self.npm.install(
                project_path,
                ["i18next", "react-i18next", "i18next-browser-languagedetector"],
            )

        with step_status(
            "Creating translation files and configuration...",
            success="i18next configured successfully!",
            failure="Failed to setup i18next",
        ) as status:
            written = [
                await self.renderer.render_to_file(
                    f"i18n/global.{lang}.json.j2",
                    src_path(project_path, "assets", "languages", lang, "global.json"),
                    ctx,
                )
                for lang in LANGUAGES
            ]
            written.append(
                await self.renderer.render_to_file(
                    "i18n/i18n.ts.j2", src_path(project_path, "i18n.ts"), ctx
                )
            )

            status.update("Adding i18n to main.tsx...")
            main_file = src_path(project_path, "main.tsx")
            await self.injector.add_import(main_file, I18N_IMPORT)
            written.append(main_file)

        print_info("  - Config: src/i18n.ts")
        for lang in LANGUAGES:
            print_info(f"  - {lang}: src/assets/languages/{lang}/global.json")
        print_info("  - Use: const { t } = useTranslation('global');")
        return written
