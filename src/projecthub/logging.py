"""
structlog setup for the projecthub backend.

Per-request fields (``request_id`` and, on ``/graphql``, ``graphql_operation``)
are bound with ``structlog.contextvars`` by the HTTP middleware and merged
into every event logged while that request is being handled.
"""

import logging
import secrets
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, get_contextvars


def configure_logging(debug: bool = False) -> None:
    """Route structlog through stdlib logging on stdout.

    Debug mode renders coloured console lines at DEBUG level; otherwise
    events are emitted as JSON at INFO level.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def new_request_id() -> str:
    """Return a random 16-character urlsafe request id."""
    return secrets.token_urlsafe(12)


def bind_request_context(request_id: str | None = None, **fields: str | None) -> str:
    """Bind the request id (generated when missing) and any non-None fields.

    Returns the request id that was bound.
    """
    request_id = request_id or new_request_id()
    bind_contextvars(
        request_id=request_id,
        **{key: value for key, value in fields.items() if value is not None},
    )
    return request_id


def clear_request_context() -> None:
    clear_contextvars()


def get_request_id() -> str | None:
    return get_contextvars().get("request_id")
