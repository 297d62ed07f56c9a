"""
saas_starter - SaaS Project Bootstrapper
========================================

An interactive CLI that creates a new SaaS application from one of a few
pre-built templates.

Features
--------
- **Interactive**: asks for a project name, a template and whether to
  install dependencies
- **Safe**: never writes into an existing directory
- **Ready to run**: the template's package.json is renamed to the project

Quick Start
-----------
```bash
pip install saas-starter
saas-starter
```

Example
-------
>>> from saas_starter import ProjectRequest, TemplateId, create_project
>>> request = ProjectRequest(name="acme-app", template=TemplateId.MINIMAL)
>>> result = create_project(request, verbose=False)

Architecture
------------
- ``cli``: Typer command, questionary prompts, Rich output
- ``generator``: collision check, template copy, manifest rename, install
- ``models``: Pydantic models for templates, requests and settings
- ``errors``: exception hierarchy
- ``templates``: bundled template trees
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from saas_starter.errors import (
    CopyFailedError,
    InstallFailedError,
    ProjectExistsError,
    StarterError,
    TemplateNotFoundError,
)
from saas_starter.generator import GenerationResult, create_project
from saas_starter.models import ProjectRequest, StarterSettings, TemplateId


__all__ = [
    "CopyFailedError",
    "GenerationResult",
    "InstallFailedError",
    "ProjectExistsError",
    "ProjectRequest",
    "StarterError",
    "StarterSettings",
    "TemplateId",
    "TemplateNotFoundError",
    "__version__",
    "create_project",
]
