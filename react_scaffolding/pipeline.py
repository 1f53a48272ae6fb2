"""react-scaffolding pipeline orchestrator and CLI entry point.

Runs the scaffolding steps strictly in sequence:

Step 0: BASE     -- ``npm create vite`` (react-ts) and ``npm install``.
Step 1..n: FEATURES -- every selected feature, in ``FEATURES`` order.

A failing step prints a failure marker and stops the run; nothing is rolled
back.  A feature whose prerequisite was not selected is skipped with a
notice.

Usage::

    react-scaffolding
    react-scaffolding --project-name my-app --yes
    python -m react_scaffolding.pipeline --answers answers.json -o ./apps
"""

from __future__ import annotations

import asyncio
import sys
import time
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError
from rich.panel import Panel

from react_scaffolding import __version__
from react_scaffolding.config import Config, FeatureSelection
from react_scaffolding.errors import MissingTemplatesError, ScaffoldError
from react_scaffolding.features import FEATURES, Feature
from react_scaffolding.injector import SourceInjector
from react_scaffolding.prompts import ask_config
from react_scaffolding.scaffolder import NpmClient, ProjectGenerator, TemplateRenderer
from react_scaffolding.utils import (
    console,
    format_duration,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    validate_project_name,
)

# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """Sequential scaffolding pipeline.

    Attributes:
        config: Configuration for this run.
        state: Mutable dictionary recording completed, skipped and failed
            steps plus a top-level ``success`` flag.
        features: One instantiated step per entry in ``FEATURES``.
    """

    def __init__(
        self,
        config: Config,
        npm: Optional[NpmClient] = None,
        renderer: Optional[TemplateRenderer] = None,
        injector: Optional[SourceInjector] = None,
    ) -> None:
        self.config = config
        self.npm = npm or NpmClient(
            npm=config.npm, npx=config.npx, timeout=config.command_timeout
        )
        self.renderer = renderer or TemplateRenderer()
        self.injector = injector or SourceInjector()
        self.generator = ProjectGenerator(config, self.npm)
        self.features: list[Feature] = [
            feature_cls(self.renderer, self.npm, self.injector) for feature_cls in FEATURES
        ]
        self.state: dict[str, Any] = {
            "started_at": datetime.now(timezone.utc).isoformat(),
            "steps_completed": [],
            "steps_skipped": [],
            "steps_failed": [],
            "files": [],
            "success": False,
        }

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def resolve_selection(self) -> list[Feature]:
        """Return the selected steps whose prerequisites are also selected.

        Selected steps with an unmet prerequisite are recorded in
        ``state["steps_skipped"]`` and reported with a yellow notice.
        """
        selection = self.config.features
        runnable: list[Feature] = []
        for feature in self.features:
            if not selection.is_enabled(feature.key):
                continue
            missing = feature.missing_requirements(selection)
            if missing:
                self.state["steps_skipped"].append(feature.key)
                print_warning(
                    f"Skipping {feature.title}: requires {', '.join(missing)}"
                )
                continue
            runnable.append(feature)
        return runnable

    def missing_templates(self, features: list[Feature]) -> list[str]:
        """Return the templates *features* render that the renderer does not ship."""
        shipped = set(self.renderer.list_templates())
        needed = dict.fromkeys(name for feature in features for name in feature.templates)
        return [name for name in needed if name not in shipped]

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    async def run(self) -> dict[str, Any]:
        """Create the base project and apply every runnable feature.

        Returns:
            The final state dictionary, including a top-level ``success``
            boolean.
        """
        pipeline_start = time.monotonic()
        selected = self.config.features.enabled()

        console.print(
            Panel(
                f"[bold bright_cyan]React Scaffolding[/bold bright_cyan] v{__version__}\n"
                f"Project  : {self.config.project_name}\n"
                f"Output   : {self.config.project_path}\n"
                f"Features : {', '.join(selected) if selected else '(none)'}",
                title="[bold]Scaffolding Start[/bold]",
                border_style="bright_cyan",
            )
        )

        runnable = self.resolve_selection()
        # Skipped steps must read as declined to the steps that follow them.
        effective = self.config.features.model_copy(
            update={key: False for key in self.state["steps_skipped"]}
        )

        steps: list[tuple[str, Any]] = [("base", self.generator.generate)]
        steps.extend(
            (feature.key, _bind_setup(feature, self.config.project_path, effective))
            for feature in runnable
        )

        all_success = True
        missing = self.missing_templates(runnable)
        if missing:
            # Nothing runs, Vite included, while a template is missing.
            error = MissingTemplatesError(self.renderer.template_dir, missing)
            all_success = False
            self._record_failure("templates", str(error), pipeline_start, error)
            steps = []

        for key, step in steps:
            step_start = time.monotonic()
            try:
                result = await step()
            except ScaffoldError as exc:
                all_success = False
                self._record_failure(key, str(exc), step_start, exc)
                break
            except Exception as exc:
                all_success = False
                tb = traceback.format_exc()
                self._record_failure(key, tb, step_start, exc)
                console.print(f"[dim]{tb}[/dim]")
                break

            self.state["steps_completed"].append(key)
            if isinstance(result, list):
                self.state["files"].extend(str(path) for path in result)

        total_elapsed = time.monotonic() - pipeline_start
        self.state["success"] = all_success
        self.state["total_duration"] = format_duration(total_elapsed)
        self.state["finished_at"] = datetime.now(timezone.utc).isoformat()

        self._print_final_summary(total_elapsed)
        return self.state

    def _record_failure(
        self, key: str, detail: str, started: float, exc: BaseException
    ) -> None:
        elapsed = time.monotonic() - started
        self.state["steps_failed"].append(key)
        self.state[f"{key}_error"] = detail
        print_error(f"Step '{key}' FAILED after {format_duration(elapsed)}: {exc}")

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def _print_final_summary(self, total_elapsed: float) -> None:
        summary = {
            "Project": self.config.project_name,
            "Location": str(self.config.project_path),
            "Completed": ", ".join(self.state["steps_completed"]) or "-",
            "Skipped": ", ".join(self.state["steps_skipped"]) or "-",
            "Failed": ", ".join(self.state["steps_failed"]) or "-",
            "Duration": format_duration(total_elapsed),
        }
        console.print()
        print_summary_table(summary, title="Scaffolding Summary")

        if not self.state["success"]:
            console.print(
                Panel(
                    "[bold red]Scaffolding stopped.[/bold red]\n"
                    "The project directory was left as generated so far.",
                    border_style="red",
                )
            )
            return

        lines = [
            f"[bold green]Your React app '{self.config.project_name}' is ready![/bold green]",
            "",
            "[bold]Next steps:[/bold]",
            f"  cd {self.config.project_name}",
            "  npm run dev",
        ]
        completed = set(self.state["steps_completed"])
        for feature in self.features:
            if feature.key in completed and feature.hints:
                lines.append("")
                lines.extend(feature.hints)

        console.print(Panel("\n".join(lines), title="[bold]Done[/bold]", border_style="green"))


def _bind_setup(feature: Feature, project_path: Path, selection: FeatureSelection):
    async def step() -> list[Path]:
        return await feature.setup(project_path, selection)

    return step


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_config(args: Any) -> Config:
    """Resolve the run configuration from CLI arguments.

    ``--answers`` loads a saved configuration, ``--yes`` takes every default
    and otherwise the interactive questions are asked.  Environment
    variables (``RSC_*``) provide the baseline for all three.

    Raises:
        ValidationError: If a value fails validation.
    """
    overrides: dict[str, Any] = {}
    if args.timeout is not None:
        overrides["command_timeout"] = args.timeout

    if args.answers:
        config = Config.load(Path(args.answers))
    else:
        config = Config.from_env()
        if not args.yes:
            config = ask_config(
                default_name=args.project_name or config.project_name,
                output_dir=config.output_dir,
                npm=config.npm,
                npx=config.npx,
                command_timeout=config.command_timeout,
            )

    if args.project_name:
        overrides["project_name"] = args.project_name
    if args.output:
        overrides["output_dir"] = Path(args.output)

    if overrides:
        config = Config.model_validate({**config.model_dump(), **overrides})
    return config


def main() -> None:
    """CLI entry point for ``react-scaffolding``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="react-scaffolding",
        description="Generate a Vite + React + TypeScript project with optional libraries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  react-scaffolding\n"
            "  react-scaffolding --project-name my-app --yes\n"
            "  react-scaffolding --answers answers.json -o ./apps\n"
        ),
    )
    parser.add_argument(
        "--project-name",
        default=None,
        help="Project name (lowercase letters, numbers, hyphens and underscores)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project is created in (default: current directory)",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Accept every default without prompting",
    )
    parser.add_argument(
        "--answers",
        default=None,
        help="Path to a saved JSON configuration to use instead of prompting",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=None,
        help="Per-command timeout in seconds (default: no timeout)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args()

    if args.project_name is not None:
        verdict = validate_project_name(args.project_name)
        if verdict is not True:
            console.print(f"[bold red]Error:[/bold red] {verdict}")
            sys.exit(1)

    if args.answers and not Path(args.answers).is_file():
        console.print(f"[bold red]Error:[/bold red] Answers file not found: {args.answers}")
        sys.exit(1)

    try:
        config = build_config(args)
        result = asyncio.run(Pipeline(config).run())
    except KeyboardInterrupt:
        console.print()
        print_warning("Setup cancelled by user.")
        sys.exit(130)
    except ValidationError as exc:
        console.print(f"[bold red]Error:[/bold red] Invalid configuration:\n{exc}")
        sys.exit(1)

    if result.get("success"):
        print_success("Scaffolding completed successfully!")
    else:
        print_error("Scaffolding failed.")
        sys.exit(1)


if __name__ == "__main__":
    main()
