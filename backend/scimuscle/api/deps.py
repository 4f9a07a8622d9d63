"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from scimuscle.core.logger import ensure_request_id
from scimuscle.services._shared.base import BaseService, ServiceContext
from scimuscle.services._shared.errors import ServiceError

F = TypeVar("F", bound=Callable[..., Any])
T = TypeVar("T")


def json_body() -> dict[str, Any]:
    """Return the JSON request body, or an empty mapping."""

    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def service_context() -> ServiceContext:
    """Build the service context from the current request."""

    profile_id = request.args.get("profile_id") or request.headers.get("X-Profile-ID")
    return ServiceContext(profile_id=profile_id, request_id=ensure_request_id())


def run_service(service: BaseService, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Call ``fn`` translating service errors into API errors."""

    try:
        return fn(*args, **kwargs)
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
