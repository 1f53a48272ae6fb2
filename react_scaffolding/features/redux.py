"""Redux Toolkit store, sample slice and the ``<Provider>`` wrap in ``main.tsx``."""

from __future__ import annotations

from pathlib import Path

from react_scaffolding.config import FeatureSelection
from react_scaffolding.injector import AnchorStyle
from react_scaffolding.utils import print_info, print_step_header, step_status

from .base import Feature, src_path

PROVIDER_IMPORT = "import { Provider } from 'react-redux';"
STORE_IMPORT = "import { store } from './store/store';"

STORE_FILES: tuple[str, ...] = ("createAppSlice.ts", "counterSlice.ts", "store.ts", "hooks.ts")


class ReduxFeature(Feature):
    key = "redux"
    title = "Redux Toolkit"
    templates = tuple(f"redux/{name}.j2" for name in STORE_FILES)
    hints = (
        "Redux Toolkit is configured with a sample counter slice.",
        "Import hooks from 'src/store/hooks' to use Redux.",
    )

    async def setup(self, project_path: Path, selection: FeatureSelection) -> list[Path]:
        print_step_header("Setting up Redux Toolkit")
        ctx = self.context(project_path.name, selection)
        main_file = src_path(project_path, "main.tsx")

        with step_status(
            "Installing Redux Toolkit and React-Redux...",
            success="Redux dependencies installed!",
            failure="Failed to install Redux Toolkit",
        ):
            await self.npm.install(project_path, ["@reduxjs/toolkit", "react-redux"])

        with step_status(
            "Creating Redux store and slice...",
            success="Redux Toolkit configured successfully!",
            failure="Failed to setup Redux Toolkit",
        ) as status:
            written = [
                await self.renderer.render_to_file(
                    f"redux/{name}.j2", src_path(project_path, "store", name), ctx
                )
                for name in STORE_FILES
            ]

            status.update("Wrapping App with Redux Provider...")
            await self.injector.add_import(main_file, STORE_IMPORT)
            await self.injector.wrap(
                main_file, AnchorStyle.RENDER, "Provider", PROVIDER_IMPORT, props="store={store}"
            )
            written.append(main_file)

        print_info("  - Store: src/store/store.ts")
        print_info("  - Sample slice: src/store/counterSlice.ts")
        print_info("  - Typed hooks: src/store/hooks.ts")
        return written
