"""structlog setup for strext.

Domain and service modules log through stdlib ``logging``; telemetry uses
``structlog.get_logger``. Both end up in one stderr handler rendered by
structlog, either as console lines or (``--log-json``) JSON lines.
"""

from __future__ import annotations

import logging
import sys

import structlog

HANDLER_NAME = "strext"

# Libraries that log at DEBUG about font files and dictionaries.
QUIET_LOGGERS = ("PIL", "pypinyin")


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route strext logging to stderr.

    Args:
        verbose: Show DEBUG from ``strext.*`` (telemetry spans included).
            Otherwise only warnings such as the md5 fallback get through.
        log_json: Render JSON lines instead of console lines.

    Calling again replaces the previous strext handler; handlers installed
    by anything else stay attached.
    """
    shared = _shared_processors()
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(
            ensure_ascii=False
        )
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("strext").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
