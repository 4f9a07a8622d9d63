from __future__ import annotations

import logging
from dataclasses import dataclass

from scimuscle.core import errors as api_errors
from scimuscle.services._shared.errors import (
    GroupLimitError,
    NotFoundError,
    ServiceError,
    ServiceValidationError,
)


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data.

    :param profile_id: Profile whose data is being processed, when known.
    :param request_id: Correlation id for logging/tracing.
    """

    profile_id: str | None = None
    request_id: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Centralize error translation and logging.
    * Offer shared validation helpers (limits).
    * Keep services thin, orchestration-only; algorithms live in plain
      functions next to each service.
    """

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context (profile, tracing).
        :type ctx: ServiceContext | None
        """
        self.ctx = ctx or ServiceContext()
        self.log = logging.getLogger(type(self).__module__)

    # ----------------------- Validation utilities ---------------------------

    def ensure_limit(self, limit: int, *, maximum: int | None = None) -> int:
        """
        Validate a result-count limit and clamp it to ``maximum``.

        :param limit: Requested number of results.
        :type limit: int
        :param maximum: Optional upper bound.
        :type maximum: int | None
        :returns: Effective limit.
        :rtype: int
        :raises ServiceValidationError: When ``limit`` is below 1.
        """
        limit = int(limit)
        if limit < 1:
            raise ServiceValidationError("limit must be at least 1", errors=[f"limit={limit}"])
        if maximum is not None:
            limit = min(limit, maximum)
        return limit

    # -------------------------- Error handling ------------------------------

    def translate_exceptions(self, exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError):
            # → 404 Not Found
            return api_errors.NotFound(str(exc))

        if isinstance(exc, GroupLimitError):
            # → 409 Conflict
            return api_errors.Conflict(str(exc))

        if isinstance(exc, ServiceValidationError):
            # → 422 Unprocessable Entity
            return api_errors.UnprocessableEntity(str(exc), details={"errors": list(exc.errors)})

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.APIError(
                message=str(exc),
                status_code=400,
                code="bad_request",
            )

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
