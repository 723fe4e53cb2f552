"""
structlog setup for clientdesk.

Request-scoped fields (``request_id``, ``user_id``) are bound through
structlog's contextvars support and merged into every event logged while the
request is handled, including events from the resolvers and the store.
"""

import logging
import sys
from uuid import uuid4

import structlog


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Send stdlib and structlog output to stdout.

    Args:
        debug: Render for a terminal instead of one JSON object per line
        level: Level name such as "warning"; defaults to DEBUG in debug, else INFO
    """
    if level:
        log_level = logging.getLevelNamesMapping()[level.upper()]
    else:
        log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    else:
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def set_request_context(request_id: str | None = None) -> str:
    """Start a fresh logging context for one request and return its ID.

    An ID sent by the caller (``X-Request-ID``) is kept so log lines can be
    matched across services; otherwise a new one is generated.
    """
    structlog.contextvars.clear_contextvars()
    request_id = request_id or uuid4().hex[:16]
    structlog.contextvars.bind_contextvars(request_id=request_id)
    return request_id


def bind_user_id(user_id: str | None) -> None:
    """Attach the authenticated subject to the rest of this request's log lines."""
    if user_id:
        structlog.contextvars.bind_contextvars(user_id=user_id)
    else:
        structlog.contextvars.unbind_contextvars("user_id")


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
