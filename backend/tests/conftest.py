"""Global pytest fixtures for the scimuscle API and services."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any, Callable

import pytest
from flask import Flask
from flask.testing import FlaskClient

from scimuscle.core.config import TestingConfig
from scimuscle.factory import create_app
from scimuscle.services.catalog.index import load_canonical_exercises


@pytest.fixture(scope="session")
def app() -> Generator[Flask, None, None]:
    """Create a Flask application configured for testing.

    Returns
    -------
    Generator[Flask, None, None]
        Application instance with :class:`TestingConfig` applied.
    """

    application = create_app(TestingConfig, instance_relative_config=False)
    application.logger.setLevel("WARNING")
    yield application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a Flask test client."""

    return app.test_client()


@pytest.fixture(scope="session")
def canonical():
    """The bundled canonical exercise list."""

    return load_canonical_exercises()


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2025-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2025-01-01")

    return _factory
