"""
saas_starter.cli - Command Line Interface
=========================================

This module provides the interactive command-line interface for
saas_starter using Typer, questionary for prompts and Rich for output.

Architecture
------------
There is a single command and no subcommands. A run goes through:

    banner
    ├── prompts    - project name, template, install dependencies?
    ├── generator  - collision check, copy, package.json rename, install
    └── report     - success panel with next steps, or error panel

Every fatal error ends up in one place, :func:`main`, which prints the
error panel and exits with status 1. A failed dependency install is only
a warning; the run still exits with status 0.

Usage Examples
--------------
    $ saas-starter
    $ saas-starter --verbose
    $ saas-starter --version

See Also
--------
- generator.py: Project materialization pipeline
- models.py: Request and settings models
"""

from __future__ import annotations

import logging
from typing import Annotated

import questionary
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from saas_starter import __version__
from saas_starter.errors import StarterError
from saas_starter.generator import GenerationResult, create_project
from saas_starter.models import (
    TEMPLATES,
    ProjectRequest,
    StarterSettings,
    TemplateId,
    available_templates,
    validate_project_name,
)


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="saas-starter",
    help="Bootstrap your next SaaS application from a pre-built template.",
    rich_markup_mode="rich",
    add_completion=False,
)

logger = logging.getLogger(__name__)

# Console for rich output
console = Console()

TROUBLESHOOTING_TIPS = (
    "Make sure you have Node.js installed (v16+)",
    "Check your internet connection for the dependency install",
    "Ensure you have write permissions in this directory",
    "Try running with sudo if on macOS/Linux (not recommended)",
)


# =============================================================================
# Logging and Version
# =============================================================================

def configure_logging(verbose: bool) -> None:
    """
    Route saas_starter log records through Rich.

    Records go to stderr so they never mix with the panels on stdout.
    Repeated calls only adjust the level.
    """
    package_logger = logging.getLogger("saas_starter")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False)
        )
        package_logger.propagate = False


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"[bold magenta]saas-starter[/] version [cyan]{__version__}[/]")
        raise typer.Exit()


# =============================================================================
# Interactive Prompts
# =============================================================================

def _project_name_validator(value: str) -> bool | str:
    """Adapt validate_project_name to questionary's validate protocol."""
    error = validate_project_name(value)
    return True if error is None else error


def prompt_project_name(settings: StarterSettings) -> str:
    """
    Ask for the project name, re-prompting until it is valid.

    Returns
    -------
    str
        A name accepted by :func:`validate_project_name`.
    """
    result = questionary.text(
        "🏗️  What is your project name?",
        default=settings.default_project_name,
        validate=_project_name_validator,
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


def template_choices() -> list[questionary.Choice]:
    """
    Build the template selection list.

    Unavailable templates are shown with their reason and cannot be
    selected.
    """
    return [
        questionary.Choice(
            title=f"● {t.label} - {t.description}",
            value=t.id,
            disabled=t.id.disabled_reason,
        )
        for t in TEMPLATES
    ]


def prompt_template() -> TemplateId:
    """
    Interactively prompt the user to select a template.

    Returns
    -------
    TemplateId
        The selected template. Always an available one.
    """
    result = questionary.select(
        "🎨 Choose your SaaS template:",
        choices=template_choices(),
        default=available_templates()[0].id,
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


def prompt_install_dependencies(settings: StarterSettings) -> bool:
    result = questionary.confirm(
        f"📦 Do you want me to run {' '.join(settings.install_command)} for you?",
        default=True,
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


def collect_request(settings: StarterSettings) -> ProjectRequest:
    """Run all prompts in order and return the validated request."""
    name = prompt_project_name(settings)
    template = prompt_template()
    install = prompt_install_dependencies(settings)

    return ProjectRequest(
        name=name,
        template=template,
        install_dependencies=install,
    )


# =============================================================================
# Output
# =============================================================================

def display_banner() -> None:
    console.print(Panel(
        "[bold white]🚀 Welcome to the SaaS Starter CLI![/]\n"
        "[dim]Bootstrap your next SaaS application in seconds[/]",
        title="[bold magenta]SaaS Starter[/]",
        border_style="magenta",
    ))
    console.print()


def display_success(
    request: ProjectRequest,
    result: GenerationResult,
    settings: StarterSettings,
) -> None:
    """
    Print the success summary and the next steps.

    Install warnings were already shown by the generator; here a failed or
    skipped install only adds an install step to the list.
    """
    template = request.template

    steps = [
        ("Navigate to your project:", f"cd {request.name}"),
    ]
    if not result.dependencies_installed:
        steps.append(("Install dependencies:", " ".join(settings.install_command)))
    steps += [
        ("Start the development server:", settings.dev_command),
        ("Open your browser and visit:", settings.local_url),
    ]
    next_steps = "\n\n".join(
        f"[bold cyan]{i}.[/] {title}\n   [yellow]{command}[/]"
        for i, (title, command) in enumerate(steps, start=1)
    )

    console.print()
    console.print(Panel(
        f"[bold green]🎉 Your SaaS project \"{request.name}\" has been created![/]\n"
        f"[dim]Using the [{template.color}]{template.label}[/] template[/]\n\n"
        f"{next_steps}",
        title="[bold green]SUCCESS[/]",
        border_style="green",
    ))

    console.print()
    console.print("[bold]Tips:[/]")
    console.print("• Check out the README.md for detailed setup instructions")
    console.print("• Customize the template to match your brand")
    console.print()
    console.print("[dim]Happy coding! 🚀[/]")


def display_error(error: Exception) -> None:
    """Print the error banner with troubleshooting tips."""
    tips = "\n".join(f"   • {tip}" for tip in TROUBLESHOOTING_TIPS)

    console.print()
    console.print(Panel(
        f"[bold red]❌ Something went wrong:[/]\n"
        f"[red]   {escape(str(error))}[/]\n\n"
        f"[yellow]💡 Troubleshooting tips:[/]\n"
        f"{tips}\n\n"
        f"[dim]If the problem persists, please open an issue on our GitHub repository.[/]",
        title="[bold red]ERROR[/]",
        border_style="red",
    ))


# =============================================================================
# Main Command
# =============================================================================

@app.command()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging.",
        ),
    ] = False,
) -> None:
    """
    Create a new SaaS project from a bundled template.

    Prompts for a project name, a template and whether to install
    dependencies, then creates [cyan]./<project-name>[/].
    """
    configure_logging(verbose)

    try:
        settings = StarterSettings.from_env()
    except ValidationError as e:
        display_error(e)
        raise typer.Exit(1)

    display_banner()
    request = collect_request(settings)

    try:
        result = create_project(request, settings)
    except StarterError as e:
        display_error(e)
        raise typer.Exit(1)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        display_error(e)
        raise typer.Exit(1)

    display_success(request, result, settings)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
