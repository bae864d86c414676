"""Logging setup: JSON or text output, per-request IDs and access timing."""

from __future__ import annotations

import json
import logging
import time
import uuid
from contextvars import ContextVar
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

access_logger = logging.getLogger("solar_app.access")

# Structured fields passed through ``extra=`` by the app and the engine
_EXTRA_FIELDS = ("method", "path", "status_code", "duration_ms", "client_ip", "design_key")

# Paths logged at DEBUG instead of INFO
_QUIET_PATHS = frozenset({"/health"})

_TEXT_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] [%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    """Stamp every record with the request ID of the current context ("-" outside requests)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("") or "-"
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        rid = getattr(record, "request_id", "-")
        if rid != "-":
            entry["request_id"] = rid

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)

        entry.update(
            (key, getattr(record, key)) for key in _EXTRA_FIELDS if getattr(record, key, None) is not None
        )
        return json.dumps(entry, default=str)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Assign an X-Request-ID to each request and log its status and duration."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex[:8]
        token = request_id_var.set(rid)
        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
            duration_ms = round((time.perf_counter() - start) * 1000, 1)
            response.headers["X-Request-ID"] = rid

            path = request.url.path
            access_logger.log(
                logging.DEBUG if path in _QUIET_PATHS else logging.INFO,
                "%s %s -> %s (%.1fms)",
                request.method,
                path,
                response.status_code,
                duration_ms,
                extra={
                    "method": request.method,
                    "path": path,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                    "client_ip": request.client.host if request.client else "unknown",
                },
            )
            return response
        finally:
            request_id_var.reset(token)


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    json_format: bool = False,
    level: int | str = logging.INFO,
    engine_level: int | str | None = None,
) -> None:
    """Configure the root logger.

    ``json_format=True`` emits one JSON object per line for log shippers.
    ``engine_level`` sets the ``solar_engine`` logger separately, e.g. to
    surface per-step DEBUG output of the design pipeline.
    """
    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    handler = logging.StreamHandler()
    handler.addFilter(RequestIdFilter())
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root.handlers.clear()
    root.addHandler(handler)

    if engine_level is not None:
        logging.getLogger("solar_engine").setLevel(_resolve_level(engine_level))
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
