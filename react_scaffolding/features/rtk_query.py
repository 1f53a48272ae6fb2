"""RTK Query API slice spliced into the Redux store.

RTK Query ships with Redux Toolkit, so nothing is installed; the step writes
``src/services/api.ts`` and registers the slice's reducer and middleware in
the store generated by the Redux step.
"""

from __future__ import annotations

from pathlib import Path

from react_scaffolding.config import FeatureSelection
from react_scaffolding.utils import print_info, print_step_header, print_warning, step_status

from .base import Feature, src_path

API_IMPORT = "import { apiSlice } from '../services/api';"
DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"

REDUCER_ANCHOR = "counter: counterReducer,"
REDUCER_REPLACEMENT = (
    "counter: counterReducer,\n"
    "    [apiSlice.reducerPath]: apiSlice.reducer,"
)
MIDDLEWARE_ANCHOR = "getDefaultMiddleware()"
MIDDLEWARE_REPLACEMENT = "getDefaultMiddleware().concat(apiSlice.middleware)"


class RtkQueryFeature(Feature):
    key = "rtk_query"
    title = "RTK Query"
    requires = ("redux",)
    templates = ("rtk_query/api.ts.j2",)
    hints = (
        "RTK Query is configured with a sample API service.",
        "Use hooks like useGetPostsQuery() from 'src/services/api'.",
    )

    async def setup(self, project_path: Path, selection: FeatureSelection) -> list[Path]:
        print_step_header("Setting up RTK Query")
        ctx = self.context(project_path.name, selection, api_base_url=DEFAULT_BASE_URL)
        store_file = src_path(project_path, "store", "store.ts")

        with step_status(
            "Creating API service...",
            success="RTK Query configured successfully!",
            failure="Failed to setup RTK Query",
        ) as status:
            api_file = await self.renderer.render_to_file(
                "rtk_query/api.ts.j2", src_path(project_path, "services", "api.ts"), ctx
            )

            status.update("Updating Redux store with RTK Query...")
            await self.injector.add_import(store_file, API_IMPORT)
            reducer_added = await self.injector.replace_in_file(
                store_file, REDUCER_ANCHOR, REDUCER_REPLACEMENT
            )
            middleware_added = await self.injector.replace_in_file(
                store_file, MIDDLEWARE_ANCHOR, MIDDLEWARE_REPLACEMENT
            )

        if not (reducer_added and middleware_added):
            print_warning(
                "Could not register apiSlice in src/store/store.ts; "
                "add its reducer and middleware manually."
            )

        print_info("  - API Service: src/services/api.ts")
        print_info("  - Example: const { data } = useGetPostsQuery();")
        return [api_file, store_file]
