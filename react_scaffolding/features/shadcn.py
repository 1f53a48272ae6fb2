"""Shadcn UI on top of Tailwind CSS.

The shadcn CLI refuses to initialise unless the ``@/*`` import alias is
declared in ``tsconfig.json`` and resolvable by Vite, so the TypeScript and
Vite configuration is rewritten before ``shadcn init`` runs.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from react_scaffolding.config import FeatureSelection
from react_scaffolding.utils import print_info, print_step_header, step_status, write_text

from .base import Feature, src_path
from .tailwind import TailwindFeature

IMPORT_ALIAS: dict[str, list[str]] = {"@/*": ["./src/*"]}

TSCONFIG_APP: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2020",
        "useDefineForClassFields": True,
        "lib": ["ES2020", "DOM", "DOM.Iterable"],
        "module": "ESNext",
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "resolveJsonModule": True,
        "isolatedModules": True,
        "noEmit": True,
        "jsx": "react-jsx",
        "strict": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "noFallthroughCasesInSwitch": True,
        "baseUrl": ".",
        "paths": IMPORT_ALIAS,
        "types": ["vite/client"],
    },
    "include": ["src"],
    "exclude": ["node_modules", "dist"],
}

TSCONFIG_NODE: dict[str, Any] = {
    "compilerOptions": {
        "composite": True,
        "skipLibCheck": True,
        "module": "ESNext",
        "moduleResolution": "bundler",
        "allowSyntheticDefaultImports": True,
        "types": ["node"],
    },
    "include": ["vite.config.ts"],
}

TSCONFIG_ROOT: dict[str, Any] = {
    "compilerOptions": {
        "baseUrl": ".",
        "paths": IMPORT_ALIAS,
    },
    "files": [],
    "references": [
        {"path": "./tsconfig.app.json"},
        {"path": "./tsconfig.node.json"},
    ],
}


class ShadcnFeature(Feature):
    key = "shadcn"
    title = "Shadcn UI"
    requires = ("tailwind",)
    templates = TailwindFeature.templates
    hints = (
        "Shadcn UI is ready! Add components with:",
        "  npx shadcn@latest add [component]",
    )

    async def setup(self, project_path: Path, selection: FeatureSelection) -> list[Path]:
        print_step_header("Setting up Shadcn UI")
        ctx = self.context(project_path.name, selection)
        written: list[Path] = []

        with step_status(
            "Installing Shadcn UI dependencies...",
            success="Shadcn UI dependencies installed!",
            failure="Failed to install Shadcn UI dependencies",
        ):
            await self.npm.install(
                project_path, ["tailwindcss", "@tailwindcss/vite", "lucide-react"]
            )
            await self.npm.install(project_path, ["@types/node"], dev=True)

        with step_status(
            "Creating Shadcn configuration...",
            success="Import alias configured!",
            failure="Failed to configure the import alias",
        ):
            written.append(
                await self.renderer.render_to_file(
                    "tailwind/index.css.j2", src_path(project_path, "index.css"), ctx
                )
            )
            for name, payload in (
                ("tsconfig.app.json", TSCONFIG_APP),
                ("tsconfig.node.json", TSCONFIG_NODE),
                ("tsconfig.json", TSCONFIG_ROOT),
            ):
                written.append(
                    await write_text(project_path / name, json.dumps(payload, indent=2) + "\n")
                )
            written.append(
                await self.renderer.render_to_file(
                    "tailwind/vite.config.ts.j2", project_path / "vite.config.ts", ctx
                )
            )

        # shadcn init asks its own questions, so no spinner around it.
        await self.npm.exec(project_path, "shadcn@latest", "init")

        with step_status(
            "Adding components...",
            success="Shadcn UI configured successfully!",
            failure="Failed to setup Shadcn UI",
        ):
            written.append(
                await self.renderer.render_to_file(
                    "tailwind/tailwind.config.js.j2", project_path / "tailwind.config.js", ctx
                )
            )
            await self.npm.exec(project_path, "shadcn@latest", "add", "button")

        print_info("  - Utils: src/lib/utils.ts")
        print_info("  - Sample component: src/components/ui/button.tsx")
        return written
