"""Logging setup: stdlib loggers rendered through structlog.

Application modules log with ``logging.getLogger(__name__)`` and pass
structured fields through ``extra=``. Those fields, together with the
request context bound by the request-log middleware, are kept on every
rendered line.
"""

import logging
import sys

import structlog

# Third-party loggers that would duplicate our access log or flood debug output
QUIET_LOGGERS = ("uvicorn.access", "pymongo")


def _pre_chain() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _renderer(json_output: bool):
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def build_formatter(json_output: bool = False) -> structlog.stdlib.ProcessorFormatter:
    """Formatter that turns stdlib records (including ``extra=`` fields) into structlog output."""
    processors = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if json_output:
        processors.append(structlog.processors.format_exc_info)
    processors.append(_renderer(json_output))
    return structlog.stdlib.ProcessorFormatter(
        processors=processors,
        foreign_pre_chain=_pre_chain(),
    )


def configure_logging(log_level: str = "info", json_output: bool = False) -> None:
    """Route all logging to stdout as console lines (dev) or JSON (``LOG_JSON=true``)."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(json_output))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def bind_request_context(request_id: str, method: str | None = None, path: str | None = None) -> None:
    """Bind request fields so every log line emitted while handling it carries them."""
    ctx = {"request_id": request_id}
    if method:
        ctx["method"] = method
    if path:
        ctx["path"] = path
    structlog.contextvars.bind_contextvars(**ctx)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
