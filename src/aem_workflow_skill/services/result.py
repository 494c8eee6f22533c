"""Installer results.

Every InstallService operation returns a :class:`ServiceResult`. A bad
platform name, an unreadable skill source, or a platform whose file could
not be written all come back as ``ok=False`` with an :class:`ErrorCode`;
the CLI turns ``ok`` into the exit status.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Failure codes reported by the installer."""

    UNKNOWN_PLATFORM = "UNKNOWN_PLATFORM"
    SOURCE_NOT_FOUND = "SOURCE_NOT_FOUND"
    SOURCE_UNREADABLE = "SOURCE_UNREADABLE"
    INSTALL_FAILED = "INSTALL_FAILED"
    UNINSTALL_FAILED = "UNINSTALL_FAILED"


class ServiceError(BaseModel):
    """Why an operation failed. ``detail`` holds the unknown ids, searched
    paths, or per-platform reasons."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of install, uninstall, or list_platforms.

    Attributes:
        ok: True only when every requested platform succeeded.
        op: ``"install"``, ``"uninstall"`` or ``"list_platforms"``.
        data: Per-platform entries (``installed``, ``removed``,
            ``failed``, ...). Kept on failure so partial progress is shown.
        warnings: Scope downgrade notices.
        error: Set when ``ok`` is False.
        meta: Extra counts, e.g. the number of registered platforms.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        *,
        data: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
        **detail: Any,
    ) -> ServiceResult:
        """Build an ``ok=False`` result; keyword extras become ``error.detail``."""
        return cls(
            ok=False,
            op=op,
            data=data or {},
            warnings=warnings or [],
            error=ServiceError(code=code.value, message=message, detail=detail),
        )
