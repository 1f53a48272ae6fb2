"""Common plumbing for feature setup steps.

A feature step installs packages, renders its templates and, where the
library needs a provider, calls the source injector against ``App.tsx`` or
``main.tsx``.  Steps never run concurrently: the pipeline awaits each one
before starting the next, which keeps wrap order equal to step order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from react_scaffolding.config import FeatureSelection
from react_scaffolding.injector import SourceInjector
from react_scaffolding.scaffolder.npm import NpmClient
from react_scaffolding.scaffolder.templates import TemplateRenderer


class Feature:
    """Base class for one optional feature.

    Subclasses set ``key`` (a ``FeatureSelection`` field), ``title`` and
    optionally ``requires``, ``templates`` and ``hints``, and implement :meth:`setup`.
    """

    key: ClassVar[str]
    title: ClassVar[str]
    requires: ClassVar[tuple[str, ...]] = ()
    # Template paths, relative to the renderer root, that setup() renders.
    templates: ClassVar[tuple[str, ...]] = ()
    # Lines shown in the final summary once the project is ready.
    hints: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        renderer: TemplateRenderer,
        npm: NpmClient,
        injector: SourceInjector,
    ) -> None:
        self.renderer = renderer
        self.npm = npm
        self.injector = injector

    def missing_requirements(self, selection: FeatureSelection) -> list[str]:
        """Return the prerequisite keys that are not selected."""
        return [key for key in self.requires if not selection.is_enabled(key)]

    def context(
        self,
        project_name: str,
        selection: FeatureSelection,
        **extra: Any,
    ) -> dict[str, Any]:
        """Template context: the project name plus one ``has_<key>`` flag per feature."""
        ctx: dict[str, Any] = {"project_name": project_name}
        for key, enabled in selection.model_dump().items():
            ctx[f"has_{key}"] = enabled
        ctx.update(extra)
        return ctx

    async def setup(self, project_path: Path, selection: FeatureSelection) -> list[Path]:
        """Apply the feature to the project; return the files written or changed."""
        raise NotImplementedError


def src_path(project_path: Path, *parts: str) -> Path:
    """Path inside the project's ``src/`` directory."""
    return project_path.joinpath("src", *parts)
