"""Tests for installing through the CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from aem_workflow_skill.cli import cli
from tests.conftest import files_under

ALL_PROJECT_FILES = [
    ".claude/skills/aem-workflow.md",
    ".cursor/rules/aem-workflow.mdc",
    ".github/copilot-instructions.md",
    ".windsurf/rules/aem-workflow.md",
    "GEMINI.md",
]


@pytest.mark.usefixtures("_isolated_project")
class TestInstallCommand:
    def test_default_installs_claude(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0, result.output
        assert files_under(project_dir) == [".claude/skills/aem-workflow.md"]
        assert "Installation complete!" in result.output

    def test_banner_shown(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert "Adobe Experience Manager" in result.output

    def test_all_platforms(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-p", "all"])
        assert result.exit_code == 0, result.output
        assert files_under(project_dir) == ALL_PROJECT_FILES

    def test_specific_platform(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-p", "gemini"])
        assert result.exit_code == 0
        assert (project_dir / "GEMINI.md").exists()
        assert not (project_dir / ".github" / "copilot-instructions.md").exists()

    def test_comma_and_repeat(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-p", "copilot,cursor", "--platform", "windsurf"])
        assert result.exit_code == 0
        assert files_under(project_dir) == [
            ".cursor/rules/aem-workflow.mdc",
            ".github/copilot-instructions.md",
            ".windsurf/rules/aem-workflow.md",
        ]

    def test_unknown_platform_fails(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-p", "foo"])
        assert result.exit_code == 1
        assert "foo" in result.output
        assert files_under(project_dir) == []

    def test_unknown_in_batch_writes_nothing(
        self, cli_runner: CliRunner, project_dir: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["-p", "claude,gemni"])
        assert result.exit_code == 1
        assert files_under(project_dir) == []

    def test_global(self, cli_runner: CliRunner, project_dir: Path, home_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["--global"])
        assert result.exit_code == 0, result.output
        assert files_under(home_dir) == [".claude/skills/aem-workflow.md"]
        assert files_under(project_dir) == []

    def test_global_downgrade_notice(
        self, cli_runner: CliRunner, project_dir: Path, home_dir: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["-g", "-p", "copilot"])
        assert result.exit_code == 0
        assert "WARNING" in result.output
        assert "does not support global install" in result.output
        assert files_under(project_dir) == [".github/copilot-instructions.md"]
        assert files_under(home_dir) == []

    def test_json_output(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "-p", "gemini"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["installed"][0]["path"] == str(project_dir / "GEMINI.md")

    def test_quiet_output(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "-p", "gemini"])
        assert result.exit_code == 0
        assert result.output.strip() == str(project_dir / "GEMINI.md")

    def test_custom_source(
        self, cli_runner: CliRunner, project_dir: Path, skill_source: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["-p", "copilot", "--source", str(skill_source)])
        assert result.exit_code == 0
        written = (project_dir / ".github" / "copilot-instructions.md").read_text()
        assert "# Actual Content" in written
        assert "name: test-skill" not in written

    def test_missing_source_fails(
        self, cli_runner: CliRunner, project_dir: Path, tmp_path: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["--source", str(tmp_path / "missing.md")])
        assert result.exit_code == 1
        assert "not found" in result.output
        assert files_under(project_dir) == []

    def test_unreadable_source_fails_cleanly(
        self, cli_runner: CliRunner, project_dir: Path, tmp_path: Path
    ) -> None:
        source = tmp_path / "bad.md"
        source.write_bytes(b"\xff\xfe# Rules")
        result = cli_runner.invoke(cli, ["--source", str(source)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Cannot read skill source" in result.output
        assert files_under(project_dir) == []

    def test_source_env_naming_directory_fails_cleanly(
        self, cli_runner: CliRunner, project_dir: Path, tmp_path: Path
    ) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "-p", "gemini"], env={"AEM_SKILL_SOURCE_PATH": str(tmp_path)}
        )
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert json.loads(result.output)["error"]["code"] == "SOURCE_UNREADABLE"
        assert files_under(project_dir) == []

    def test_empty_platform_means_default(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-p", ","])
        assert result.exit_code == 0, result.output
        assert files_under(project_dir) == [".claude/skills/aem-workflow.md"]

    def test_strict_frontmatter_flag(
        self, cli_runner: CliRunner, project_dir: Path, tmp_path: Path
    ) -> None:
        source = tmp_path / "broken.md"
        source.write_text("---\nname: x\n# Still here\n")
        result = cli_runner.invoke(
            cli, ["-p", "gemini", "--source", str(source), "--strict-frontmatter"]
        )
        assert result.exit_code == 0
        assert "# Still here" in (project_dir / "GEMINI.md").read_text()
