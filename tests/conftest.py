"""
pytest configuration and shared fixtures for saas_starter tests.

Fixtures
--------
templates_dir : Path
    A template root with a ``minimal`` tree (with package.json) and an
    ``ecommerce`` tree (without one).

settings : StarterSettings
    Settings pointing at ``templates_dir``.

workdir : Path
    An empty directory to create projects in.
"""

import json
from pathlib import Path

import pytest

from saas_starter.models import StarterSettings


MINIMAL_MANIFEST = {
    "name": "saas-minimal-template",
    "version": "0.1.0",
    "private": True,
    "description": "Démo – starter",
    "scripts": {"dev": "next dev"},
    "dependencies": {"next": "14.2.5"},
}


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """
    Create a small template root.

    Returns
    -------
    Path
        Directory containing ``minimal/`` and ``ecommerce/``.
    """
    root = tmp_path / "templates"

    minimal = root / "minimal"
    (minimal / "app").mkdir(parents=True)
    (minimal / "package.json").write_text(
        json.dumps(MINIMAL_MANIFEST, indent=4, ensure_ascii=False),
        encoding="utf-8",
    )
    (minimal / "README.md").write_text("# Minimal\n")
    (minimal / "app" / "page.js").write_text("export default function Home() {}\n")
    (minimal / "logo.bin").write_bytes(bytes(range(256)))

    ecommerce = root / "ecommerce"
    ecommerce.mkdir()
    (ecommerce / "index.html").write_text("<h1>Store</h1>\n")

    return root


@pytest.fixture
def settings(templates_dir: Path) -> StarterSettings:
    """Settings that read templates from the temporary root."""
    return StarterSettings(templates_dir=templates_dir)


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """An empty directory where projects are created."""
    path = tmp_path / "work"
    path.mkdir()
    return path
