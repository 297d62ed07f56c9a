"""
saas_starter.models - Pydantic Models for Project Requests
==========================================================

This module defines the data models used throughout saas_starter:

    TemplateId (enum)            - the fixed set of bundled templates
    TemplateDescriptor           - read-only view of one template
    ProjectRequest               - validated answers from the prompts
    StarterSettings              - tool configuration (paths, package manager)

All of them live for a single run. Nothing is persisted.

Usage Example
-------------
>>> from saas_starter.models import ProjectRequest, TemplateId
>>> request = ProjectRequest(name="acme-app", template=TemplateId.MINIMAL)
>>> request.install_dependencies
True
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from saas_starter.templates import TEMPLATES_DIR


# =============================================================================
# Project Name Validation
# =============================================================================

PROJECT_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")

EMPTY_NAME_MESSAGE = "Project name cannot be empty"
INVALID_NAME_MESSAGE = (
    "Project name can only contain letters, numbers, hyphens, and underscores"
)


def validate_project_name(value: str) -> str | None:
    """
    Check a candidate project name.

    Parameters
    ----------
    value : str
        Raw input from the operator.

    Returns
    -------
    str | None
        None if the name is acceptable, otherwise the rejection message
        to show before re-prompting.

    Examples
    --------
    >>> validate_project_name("acme-app") is None
    True
    >>> validate_project_name("acme app")
    'Project name can only contain letters, numbers, hyphens, and underscores'
    """
    if not value.strip():
        return EMPTY_NAME_MESSAGE
    if not PROJECT_NAME_PATTERN.fullmatch(value):
        return INVALID_NAME_MESSAGE
    return None


# =============================================================================
# Templates
# =============================================================================

class TemplateId(str, Enum):
    """
    Bundled SaaS starter templates.

    Each value is also the name of the template's directory under
    ``saas_starter/templates``.

    Attributes
    ----------
    MINIMAL : str
        Clean and simple starter.

    ANALYTICS : str
        Dashboard starter. Listed in the prompt but not available yet.

    ECOMMERCE : str
        Full-featured e-commerce starter.
    """

    MINIMAL = "minimal"
    ANALYTICS = "analytics"
    ECOMMERCE = "ecommerce"

    @property
    def label(self) -> str:
        """Display name shown in prompts and summaries."""
        return self.value.capitalize()

    @property
    def description(self) -> str:
        descriptions = {
            TemplateId.MINIMAL: "Clean and simple starter",
            TemplateId.ANALYTICS: "Coming soon...",
            TemplateId.ECOMMERCE: "Full-featured e-commerce",
        }
        return descriptions[self]

    @property
    def color(self) -> str:
        """Rich color used for the template's marker and label."""
        colors = {
            TemplateId.MINIMAL: "cyan",
            TemplateId.ANALYTICS: "yellow",
            TemplateId.ECOMMERCE: "magenta",
        }
        return colors[self]

    @property
    def available(self) -> bool:
        return self is not TemplateId.ANALYTICS

    @property
    def disabled_reason(self) -> str | None:
        """Reason shown next to a template that cannot be selected."""
        return None if self.available else "Not available yet"


class TemplateDescriptor(BaseModel):
    """
    Read-only description of one template.

    Attributes
    ----------
    id : TemplateId
        Template key, also its directory name.

    label : str
        Display name.

    description : str
        One-line summary for the selection prompt.

    color : str
        Rich color name.

    available : bool
        Whether the template can be selected.
    """

    model_config = ConfigDict(frozen=True)

    id: TemplateId
    label: str
    description: str
    color: str
    available: bool

    @classmethod
    def from_id(cls, template: TemplateId) -> TemplateDescriptor:
        return cls(
            id=template,
            label=template.label,
            description=template.description,
            color=template.color,
            available=template.available,
        )


TEMPLATES: tuple[TemplateDescriptor, ...] = tuple(
    TemplateDescriptor.from_id(t) for t in TemplateId
)


def available_templates() -> list[TemplateDescriptor]:
    """Templates the operator is allowed to pick, in display order."""
    return [t for t in TEMPLATES if t.available]


# =============================================================================
# Project Request
# =============================================================================

class ProjectRequest(BaseModel):
    """
    Fully validated answers collected from the operator.

    Attributes
    ----------
    name : str
        Project directory name. Letters, digits, hyphens and underscores
        only. Case is preserved.

    template : TemplateId
        Selected template. Must be available.

    install_dependencies : bool
        Whether to run the package manager's install command afterwards.

    Raises
    ------
    pydantic.ValidationError
        If the name is invalid or the template is disabled.
    """

    name: str = Field(description="Project directory name")
    template: TemplateId = Field(description="Template to copy")
    install_dependencies: bool = Field(
        default=True,
        description="Run the package manager install step",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        error = validate_project_name(v)
        if error:
            raise ValueError(error)
        return v

    @field_validator("template")
    @classmethod
    def validate_template_available(cls, v: TemplateId) -> TemplateId:
        if not v.available:
            msg = f"Template '{v.label}' is not available: {v.disabled_reason}"
            raise ValueError(msg)
        return v


# =============================================================================
# Settings
# =============================================================================

SUPPORTED_PACKAGE_MANAGERS = ("npm", "pnpm", "yarn", "bun")


class StarterSettings(BaseModel):
    """
    Configuration for a scaffolding run.

    Defaults describe the bundled templates and npm. Two values can be
    overridden from the environment, see :meth:`from_env`.

    Attributes
    ----------
    templates_dir : Path
        Directory holding one subdirectory per template.

    package_manager : str
        Executable used for installing dependencies and in the
        printed next steps.

    manifest_name : str
        Metadata file at the template root whose ``name`` is rewritten.

    default_project_name : str
        Default answer for the project name prompt.

    local_url : str
        URL shown in the next steps.
    """

    model_config = ConfigDict(frozen=True)

    templates_dir: Path = Field(default=TEMPLATES_DIR)
    package_manager: str = Field(default="npm")
    manifest_name: str = Field(default="package.json")
    default_project_name: str = Field(default="my-saas-app")
    local_url: str = Field(default="http://localhost:3000")

    @field_validator("package_manager")
    @classmethod
    def validate_package_manager(cls, v: str) -> str:
        v = v.lower().strip()
        if v not in SUPPORTED_PACKAGE_MANAGERS:
            valid = ", ".join(SUPPORTED_PACKAGE_MANAGERS)
            msg = f"Unsupported package manager '{v}'. Valid: {valid}"
            raise ValueError(msg)
        return v

    @property
    def install_command(self) -> list[str]:
        return [self.package_manager, "install"]

    @property
    def dev_command(self) -> str:
        return f"{self.package_manager} run dev"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StarterSettings:
        """
        Build settings, applying environment overrides.

        Parameters
        ----------
        environ : Mapping[str, str] | None
            Environment to read. Defaults to ``os.environ``.

        Recognized variables
        --------------------
        SAAS_STARTER_TEMPLATES_DIR
            Alternative template root.
        SAAS_STARTER_PACKAGE_MANAGER
            One of npm, pnpm, yarn, bun.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        templates_dir = env.get("SAAS_STARTER_TEMPLATES_DIR")
        if templates_dir:
            overrides["templates_dir"] = Path(templates_dir).expanduser()

        package_manager = env.get("SAAS_STARTER_PACKAGE_MANAGER")
        if package_manager:
            overrides["package_manager"] = package_manager

        return cls(**overrides)
