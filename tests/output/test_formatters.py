"""Tests for output mode selection."""

import json

from aem_workflow_skill.output.formatters import OutputSettings, format_result
from aem_workflow_skill.services.result import ServiceResult

RESULT = ServiceResult(
    ok=True,
    op="install",
    data={
        "scope": "project",
        "installed": [{"platform": "gemini", "path": "/p/GEMINI.md"}],
        "failed": [],
    },
)


class TestFormatResult:
    def test_default_is_human(self) -> None:
        output = format_result(RESULT)
        assert output.startswith("OK")
        assert "gemini" in output

    def test_json(self) -> None:
        output = format_result(RESULT, settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["op"] == "install"
        assert parsed["data"]["installed"][0]["path"] == "/p/GEMINI.md"

    def test_quiet(self) -> None:
        assert format_result(RESULT, settings=OutputSettings(quiet=True)) == "/p/GEMINI.md"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(RESULT, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["ok"] is True
