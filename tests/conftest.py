"""Shared pytest fixtures and test helpers for aem-workflow-skill tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from aem_workflow_skill.infrastructure.filesystem import LocalFileSystem
from aem_workflow_skill.services.installer import InstallService

SAMPLE_SKILL = """\
---
name: test-skill
description: test description
---
# Actual Content
This is the skill content.
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``AEM_SKILL_*`` variables from the host out of every test."""
    for name in (
        "AEM_SKILL_WORKING_DIR",
        "AEM_SKILL_HOME_DIR",
        "AEM_SKILL_SOURCE_PATH",
        "AEM_SKILL_STRICT_FRONTMATTER",
        "AEM_SKILL_JSON_OUTPUT",
        "AEM_SKILL_QUIET",
        "AEM_SKILL_VERBOSE",
        "AEM_SKILL_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Empty project directory used as the install working directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Stand-in user home for global-scope installs."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def skill_source(tmp_path: Path) -> Path:
    """A small skill document with frontmatter."""
    path = tmp_path / "SKILL.md"
    path.write_text(SAMPLE_SKILL, encoding="utf-8")
    return path


@pytest.fixture
def installer(project_dir: Path, home_dir: Path, skill_source: Path) -> InstallService:
    """InstallService over the local disk, isolated to temp directories."""
    return InstallService(
        LocalFileSystem(),
        working_dir=project_dir,
        home_dir=home_dir,
        source_path=skill_source,
        version="9.9.9",
    )


@pytest.fixture
def _isolated_project(
    project_dir: Path, home_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Run the CLI from a temp project with a temp home.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_dir)
    monkeypatch.setenv("AEM_SKILL_HOME_DIR", str(home_dir))


def files_under(root: Path) -> list[str]:
    """Relative paths of every file below *root*, sorted."""
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())
