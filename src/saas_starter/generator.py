"""
saas_starter.generator - Project Materialization Pipeline
=========================================================

This module turns a validated :class:`ProjectRequest` into a project
directory on disk. It is the only part of saas_starter that touches the
filesystem or spawns processes.

Architecture
------------
The generator follows a pipeline pattern:

    1. Resolve the target path and refuse to overwrite anything
    2. Copy the template tree byte-for-byte
    3. Rewrite the ``name`` field of the template's package.json
    4. Optionally run the package manager's install command

Steps 1-3 are fatal on failure. A failed install only adds a warning:
the project already exists and is usable, so the run still succeeds.

Nothing is rolled back. If copying fails halfway, the partial directory
stays on disk for the operator to inspect or delete.

Usage Example
-------------
>>> from saas_starter.generator import create_project
>>> from saas_starter.models import ProjectRequest, TemplateId
>>>
>>> request = ProjectRequest(
...     name="acme-app",
...     template=TemplateId.MINIMAL,
...     install_dependencies=False,
... )
>>> result = create_project(request, verbose=False)
>>> result.project_path.name
'acme-app'

See Also
--------
- models.py: Request and settings models
- errors.py: Failure types raised here
"""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from saas_starter.errors import (
    CopyFailedError,
    InstallFailedError,
    ProjectExistsError,
    StarterError,
    TemplateNotFoundError,
)
from saas_starter.models import ProjectRequest, StarterSettings, TemplateId


logger = logging.getLogger(__name__)

# Console for rich output
console = Console()


# =============================================================================
# Result Data Classes
# =============================================================================


@dataclass
class GenerationResult:
    """
    Result of a project generation run.

    Attributes
    ----------
    success : bool
        Whether the project was materialized. Stays True when only the
        dependency install failed.

    project_path : Path
        Absolute path of the project directory.

    template : TemplateId | None
        Template the project was created from.

    files_created : list[Path]
        Every file copied from the template.

    manifest_updated : bool
        Whether a package.json was found and its name rewritten.

    dependencies_installed : bool
        Whether the install command ran and succeeded.

    warnings : list[str]
        Non-fatal problems, such as a failed install.
    """

    success: bool
    project_path: Path
    template: TemplateId | None = None
    files_created: list[Path] = field(default_factory=list)
    manifest_updated: bool = False
    dependencies_installed: bool = False
    warnings: list[str] = field(default_factory=list)


# =============================================================================
# Collision Guard
# =============================================================================


def resolve_project_path(name: str, base_dir: Path | None = None) -> Path:
    """
    Resolve the project directory and make sure it is free.

    Parameters
    ----------
    name : str
        Validated project name.

    base_dir : Path | None
        Parent directory. Defaults to the current working directory.

    Returns
    -------
    Path
        Absolute path of the (not yet existing) project directory.

    Raises
    ------
    ProjectExistsError
        If anything already exists at that path.

    Notes
    -----
    This is a check-then-act test. :func:`copy_template` creates the
    directory exclusively, so a directory that appears in between is
    still reported as a collision rather than merged into.
    """
    # Only the parent is resolved; a symlink at the target itself must be
    # seen, not followed
    project_path = (base_dir or Path.cwd()).resolve() / name

    # is_symlink catches dangling links that exists() reports as missing
    if project_path.exists() or project_path.is_symlink():
        raise ProjectExistsError(project_path)

    logger.debug("Project path %s is free", project_path)
    return project_path


# =============================================================================
# Template Materializer
# =============================================================================


def get_template_path(template: TemplateId, templates_dir: Path) -> Path:
    """
    Locate the source tree of a template.

    Raises
    ------
    TemplateNotFoundError
        If the tree is missing. This is a packaging defect, not
        something the operator can fix.
    """
    template_path = templates_dir / template.value
    if not template_path.is_dir():
        raise TemplateNotFoundError(template.value, template_path)
    return template_path


def copy_template(
    template: TemplateId,
    project_path: Path,
    templates_dir: Path,
) -> list[Path]:
    """
    Copy a template tree into a new project directory.

    Parameters
    ----------
    template : TemplateId
        Template to copy.

    project_path : Path
        Destination. Must not exist; it is created by the copy.

    templates_dir : Path
        Root holding one directory per template.

    Returns
    -------
    list[Path]
        Files created under ``project_path``, sorted.

    Raises
    ------
    TemplateNotFoundError
        If the template tree is missing.
    ProjectExistsError
        If ``project_path`` appeared after the collision check.
    CopyFailedError
        On any other I/O error. The partial copy is left in place.
    """
    source = get_template_path(template, templates_dir)
    logger.debug("Copying %s -> %s", source, project_path)

    try:
        shutil.copytree(source, project_path, dirs_exist_ok=False)
    except FileExistsError as e:
        if e.filename is not None and Path(e.filename) == project_path:
            raise ProjectExistsError(project_path) from e
        msg = f"Failed to copy template files: {e}"
        raise CopyFailedError(msg, project_path) from e
    except OSError as e:
        # shutil.Error is an OSError too
        msg = f"Failed to copy template files: {e}"
        raise CopyFailedError(msg, project_path) from e

    files = sorted(p for p in project_path.rglob("*") if p.is_file())
    logger.debug("Copied %d files", len(files))
    return files


def update_manifest(
    project_path: Path,
    project_name: str,
    manifest_name: str = "package.json",
) -> bool:
    """
    Set the ``name`` field of the project's manifest.

    The file is rewritten with 2-space indentation and a trailing newline.
    Key order and non-ASCII text are kept as they were.

    Parameters
    ----------
    project_path : Path
        Root of the copied project.

    project_name : str
        Value to store in ``name``.

    manifest_name : str, default="package.json"
        Manifest file name at the project root.

    Returns
    -------
    bool
        True if the manifest was rewritten, False if the template
        has none.

    Raises
    ------
    CopyFailedError
        If the manifest is not a JSON object or cannot be read or written.
    """
    manifest_path = project_path / manifest_name
    if not manifest_path.is_file():
        logger.debug("No %s in %s, skipping rename", manifest_name, project_path)
        return False

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"Invalid {manifest_name}: {e}"
        raise CopyFailedError(msg, manifest_path) from e
    except OSError as e:
        msg = f"Could not read {manifest_name}: {e}"
        raise CopyFailedError(msg, manifest_path) from e

    if not isinstance(data, dict):
        msg = f"Invalid {manifest_name}: expected a JSON object"
        raise CopyFailedError(msg, manifest_path)

    data["name"] = project_name

    try:
        manifest_path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"Could not write {manifest_name}: {e}"
        raise CopyFailedError(msg, manifest_path) from e

    logger.debug("Set %s name to %r", manifest_name, project_name)
    return True


# =============================================================================
# Dependency Installer
# =============================================================================


def install_dependencies(
    project_path: Path,
    command: Sequence[str] = ("npm", "install"),
) -> subprocess.CompletedProcess[str]:
    """
    Run the package manager's install command inside the project.

    Output is captured rather than streamed, and only surfaces through
    :class:`InstallFailedError` when something goes wrong.

    Raises
    ------
    InstallFailedError
        If the command exits non-zero or its executable is missing.
    """
    logger.debug("Running %s in %s", " ".join(command), project_path)

    try:
        completed = subprocess.run(
            list(command),
            cwd=project_path,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise InstallFailedError(command) from e
    except subprocess.CalledProcessError as e:
        output = "\n".join(part.strip() for part in (e.stdout, e.stderr) if part)
        raise InstallFailedError(command, e.returncode, output) from e

    logger.debug("Install finished with status %s", completed.returncode)
    return completed


# =============================================================================
# Main Generation Function
# =============================================================================


@contextmanager
def _spinner(message: str, verbose: bool) -> Iterator[None]:
    if not verbose:
        yield
        return
    with console.status(message, spinner="dots"):
        yield


def create_project(
    request: ProjectRequest,
    settings: StarterSettings | None = None,
    *,
    base_dir: Path | None = None,
    verbose: bool = True,
) -> GenerationResult:
    """
    Create a new project from a validated request.

    Parameters
    ----------
    request : ProjectRequest
        Project name, template and install flag.

    settings : StarterSettings | None
        Template location and package manager. Defaults to
        ``StarterSettings()``.

    base_dir : Path | None
        Directory to create the project in. Defaults to the current
        working directory.

    verbose : bool, default=True
        If True, display progress information to the console.

    Returns
    -------
    GenerationResult
        Outcome of the run. ``success`` is True even when the install
        step failed; see ``warnings``.

    Raises
    ------
    ProjectExistsError
        If the project directory already exists. Nothing is written.
    TemplateNotFoundError
        If the template tree is missing from the package.
    CopyFailedError
        If copying or the manifest update fails. No rollback.
    """
    settings = settings or StarterSettings()
    template = request.template

    project_path = resolve_project_path(request.name, base_dir)

    result = GenerationResult(
        success=False,
        project_path=project_path,
        template=template,
    )

    if verbose:
        console.print()
        console.print(
            Panel(
                f"[bold blue]Creating your SaaS project...[/]\n\n"
                f"[dim]Project:[/]  {request.name}\n"
                f"[dim]Template:[/] [{template.color}]{template.label}[/]\n"
                f"[dim]Location:[/] {escape(str(project_path))}",
                title="[bold]saas-starter[/]",
                border_style="blue",
            )
        )
        console.print()

    try:
        # Step 1: Copy template files and rename the project
        with _spinner(
            f"[blue]Copying [{template.color}]{template.label}[/] template files...[/]",
            verbose,
        ):
            result.files_created = copy_template(
                template, project_path, settings.templates_dir
            )
            result.manifest_updated = update_manifest(
                project_path, request.name, settings.manifest_name
            )

        if verbose:
            console.print("[green]✅ Template files copied successfully![/]")

    except StarterError as e:
        logger.debug("Materialization failed: %s", e)
        if verbose:
            console.print("[red]❌ Failed to copy template files[/]")
        raise

    # Step 2: Install dependencies
    if request.install_dependencies:
        try:
            with _spinner(
                "[blue]📦 Installing dependencies... This might take a few minutes[/]",
                verbose,
            ):
                install_dependencies(project_path, settings.install_command)

            result.dependencies_installed = True
            if verbose:
                console.print("[green]✅ Dependencies installed successfully![/]")

        except InstallFailedError as e:
            remedy = f"cd {request.name} && {e.remedy}"
            result.warnings.append(f"{e}; run '{remedy}' to finish the install")
            logger.info("Dependency install failed: %s", e)
            if verbose:
                console.print("[red]❌ Failed to install dependencies[/]")
                console.print(
                    f"[yellow]   You can install them manually by running: {escape(remedy)}[/]"
                )
                console.print(f"[dim]   Error: {escape(str(e))}[/]")
                if e.output:
                    console.print(e.output, style="dim", markup=False, highlight=False)

    result.success = True
    return result
