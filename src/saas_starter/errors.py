"""
saas_starter.errors - Exception Hierarchy
=========================================

Every failure the scaffolding pipeline can report derives from
:class:`StarterError`. The CLI catches that base class in one place,
prints the error banner and exits with status 1.

    StarterError
    ├── ProjectExistsError     (also a FileExistsError)
    ├── TemplateNotFoundError  (also a FileNotFoundError)
    ├── CopyFailedError
    └── InstallFailedError     (non-fatal, reported as a warning)

Invalid project names are not represented here: they are rejected by the
prompt validator and never leave the input step.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class StarterError(Exception):
    """Base class for all scaffolding failures."""


class ProjectExistsError(StarterError, FileExistsError):
    """
    Raised when the target project directory already exists.

    Attributes
    ----------
    path : Path
        The path that is already taken.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'Directory "{path.name}" already exists!')


class TemplateNotFoundError(StarterError, FileNotFoundError):
    """Raised when a template's source tree is missing from the package."""

    def __init__(self, template: str, path: Path) -> None:
        self.template = template
        self.path = path
        super().__init__(f'Template "{template}" not found at {path}')


class CopyFailedError(StarterError):
    """
    Raised when the template tree cannot be materialized.

    The partially copied directory is left on disk.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class InstallFailedError(StarterError):
    """
    Raised when the dependency install command fails or cannot be started.

    Attributes
    ----------
    command : list[str]
        The command that was run.
    returncode : int | None
        Exit status, or None if the executable could not be found.
    output : str
        Captured stdout and stderr, joined.
    """

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None = None,
        output: str = "",
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.output = output

        cmd = " ".join(self.command)
        if returncode is None:
            msg = f"Could not run '{cmd}': executable not found"
        else:
            msg = f"'{cmd}' exited with status {returncode}"
        super().__init__(msg)

    @property
    def remedy(self) -> str:
        """Command the operator can run by hand to finish the install."""
        return " ".join(self.command)
