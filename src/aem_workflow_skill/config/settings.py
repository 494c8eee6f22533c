"""Unified settings — CLI flags, env vars, and defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``AEM_SKILL_*`` prefix
  3. Code defaults

CLI flags that were not given arrive as ``None`` and are dropped before
construction, so an env var is not shadowed by an unset flag.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings


class SkillSettings(BaseSettings):
    """Settings for one installer invocation.

    Stored on :class:`AppContext` at the CLI root and frozen after
    construction.

    Attributes:
        working_dir: Project root used for project-scope installs and
            legacy-file cleanup.
        home_dir: Base for global-scope installs.
        source_path: Explicit skill document, replacing the packaged copy.
        strict_frontmatter: Leave documents with an unterminated ``---``
            opener untouched instead of discarding the remainder.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "AEM_SKILL_",
    }

    # --- Paths ---
    working_dir: Path = Field(default_factory=Path.cwd)
    home_dir: Path = Field(default_factory=Path.home)
    source_path: Path | None = None

    # --- Behaviour ---
    strict_frontmatter: bool = False

    # --- Output ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> SkillSettings:
        """Construct settings from CLI invocation, ignoring unset flags."""
        overrides = {key: value for key, value in cli_flags.items() if value is not None}
        return cls(**overrides)
