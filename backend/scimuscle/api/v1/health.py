"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from scimuscle.api.deps import json_response, timing
from scimuscle.services._shared.errors import CatalogError
from scimuscle.services.catalog.index import get_all_canonical_exercises

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application and catalog health information."""

    catalog_status = "ok"
    try:
        exercises = len(get_all_canonical_exercises())
    except CatalogError:
        current_app.logger.exception("healthcheck.catalog_error")
        catalog_status = "fail"
        exercises = 0
    version = current_app.config.get("APP_VERSION", "dev")
    payload = {
        "status": "ok" if catalog_status == "ok" else "degraded",
        "catalog": catalog_status,
        "exercises": exercises,
        "version": version,
    }
    return json_response(payload)
