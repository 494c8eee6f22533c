"""Diagnostic logging for the installer.

Diagnostics go to stderr and stay out of the way of the rendered result
on stdout. Only the ``aem_workflow_skill`` logger is configured; other
libraries keep Python's defaults.

Package modules log through stdlib ``logging.getLogger(__name__)`` and
structlog's ProcessorFormatter renders those records as console lines or,
with ``--log-json``, one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "aem_workflow_skill"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route package diagnostics to stderr.

    Safe to call repeatedly: the package handler is replaced, not stacked.

    Args:
        verbose: Show DEBUG records (per-file install/remove steps).
            Otherwise only WARNING and above.
        log_json: Emit JSON lines instead of console lines.
    """
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    package = logging.getLogger(PACKAGE_LOGGER)
    package.handlers.clear()
    package.addHandler(handler)
    package.propagate = False
    package.setLevel(logging.DEBUG if verbose else logging.WARNING)
