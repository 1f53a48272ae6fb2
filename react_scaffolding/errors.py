"""Exception hierarchy shared by the injector, the npm client and the pipeline.

Every error raised while generating a project derives from ``ScaffoldError``
so the pipeline can report it with a failure marker and stop.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every fatal scaffolding error."""


class AnchorNotFoundError(ScaffoldError):
    """Raised when no anchor pattern matches the target file text."""

    def __init__(self, style: str, path: Path | None = None) -> None:
        self.style = style
        self.path = path
        where = f" in {path}" if path is not None else ""
        super().__init__(f"Could not find a {style} anchor expression{where}")


class CommandFailedError(ScaffoldError):
    """Raised when an external npm / npx process exits non-zero."""

    def __init__(self, cmd: list[str], returncode: int, stderr: str = "") -> None:
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed with exit code {returncode}: {' '.join(cmd)}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)


class FilesystemError(ScaffoldError):
    """Raised when a generated file cannot be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"{path}: {reason}")


class MissingTemplatesError(ScaffoldError):
    """Raised before any step runs when selected features lack their templates."""

    def __init__(self, template_dir: Path, missing: list[str]) -> None:
        self.template_dir = template_dir
        self.missing = missing
        super().__init__(f"Missing templates in {template_dir}: {', '.join(missing)}")
