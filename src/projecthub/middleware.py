"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import bind_request_context, clear_request_context, get_logger

logger = get_logger(__name__)

SENSITIVE_KEYS = {
    "password",
    "token",
    "api_key",
    "secret",
    "auth",
    "authorization",
    "access_token",
    "refresh_token",
    "key",
    "session",
    "cookie",
    "credentials",
}

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Redact query parameters whose names look sensitive."""
    sanitized = {}
    for key, value in params.items():
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
            sanitized[key] = "[REDACTED]"
        else:
            sanitized[key] = value
    return sanitized


def operation_name_from_document(data: dict[str, Any]) -> str | None:
    """Derive a loggable operation name from a GraphQL request payload."""
    op = data.get("operationName")
    if isinstance(op, str) and op:
        return op

    q = data.get("query", "")
    if not isinstance(q, str) or not q:
        return None
    if "__schema" in q or "IntrospectionQuery" in q:
        return "__introspection"

    match = _OPERATION_RE.search(q)
    if match:
        kind, name = match.groups()
        return f"mutation:{name}" if kind == "mutation" else name
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        return operation_name_from_document(dict(request.query_params))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        return operation_name_from_document(data)

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Bind per-request logging context and log each request's outcome."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        graphql_operation = await extract_graphql_operation_name(request)
        request_id = bind_request_context(
            request.headers.get("x-request-id"), graphql_operation=graphql_operation
        )

        try:
            sanitized_params = None
            if request.query_params:
                sanitized_params = sanitize_query_params(dict(request.query_params))
                # Never log raw GraphQL payloads sent in the query string
                if request.url.path == "/graphql":
                    for k in ("query", "variables", "extensions"):
                        if k in sanitized_params:
                            sanitized_params[k] = "[REDACTED]"

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=sanitized_params,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )

            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
