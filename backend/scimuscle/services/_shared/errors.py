"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never import Flask or HTTP
helpers. The translation to HTTP responses (RFC 7807) is handled by
``scimuscle/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from pure domain functions.
    - ``BaseService`` translates them to ``APIError`` at the boundary.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when a referenced entity does not exist.

    :param entity: Entity name (e.g., "MuscleGroup").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class ServiceValidationError(ServiceError):
    """
    Raised when service input breaks a business rule.

    :param message: Short human-readable explanation.
    :type message: str
    :param errors: Individual violations, reported together.
    :type errors: list[str]
    """

    message: str
    errors: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return self.message


class GroupNotFoundError(NotFoundError):
    """Raised when a muscle group ID is absent from a configuration."""

    def __init__(self, group_id: str) -> None:
        super().__init__(entity="MuscleGroup", key=group_id)

    def __str__(self) -> str:
        return f'Group with ID "{self.key}" not found'


class GroupLimitError(ServiceError):
    """Raised when adding a group would exceed the per-profile limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Cannot have more than {limit} muscle groups")
        self.limit = limit


class InvalidConfigError(ServiceValidationError):
    """Raised when a muscle group configuration fails validation."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(message="Invalid muscle group configuration", errors=list(errors))


class CatalogError(ServiceError):
    """Raised when the bundled canonical exercise list is malformed."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}
