"""Canonical exercise endpoints."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from scimuscle.api.deps import json_response, run_service, service_context, timing
from scimuscle.schemas import CanonicalExerciseSchema, ExerciseSearchQuerySchema
from scimuscle.services.catalog.service import ExerciseCatalogService

bp = Blueprint("exercises", __name__)

exercise_list_schema = CanonicalExerciseSchema(many=True)


@bp.get("")
@timing
def list_exercises():
    """Return every canonical exercise in catalog order."""

    service = ExerciseCatalogService(ctx=service_context())
    items = run_service(service, service.list_exercises)
    return json_response({"data": exercise_list_schema.dump(items), "meta": {"total": len(items)}})


@bp.get("/search")
@timing
def search_exercises():
    """Rank canonical exercises against ``q``."""

    config = current_app.config
    query_schema = ExerciseSearchQuerySchema(
        default_limit=config.get("SEARCH_DEFAULT_LIMIT", 10),
        max_limit=config.get("SEARCH_MAX_LIMIT", 50),
    )
    args = query_schema.load_query(request.args)
    service = ExerciseCatalogService(ctx=service_context())
    items = run_service(service, service.search, args["q"], limit=args["limit"])
    return json_response({"data": exercise_list_schema.dump(items), "meta": {"total": len(items)}})
