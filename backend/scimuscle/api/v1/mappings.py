"""Auto-match and mapping resolution endpoints."""

from __future__ import annotations

from flask import Blueprint

from scimuscle.api.deps import json_body, json_response, run_service, service_context, timing
from scimuscle.schemas import (
    AutoMatchRequestSchema,
    AutoMatchSuggestionSchema,
    ResolveRequestSchema,
)
from scimuscle.services.automatch.service import AutoMatchService
from scimuscle.services.mappings.resolver import MappingResolverService

bp = Blueprint("mappings", __name__)

auto_match_request_schema = AutoMatchRequestSchema()
suggestion_list_schema = AutoMatchSuggestionSchema(many=True)
resolve_request_schema = ResolveRequestSchema()


@bp.post("/auto-match")
@timing
def auto_match():
    """Suggest canonical exercises for the posted unmapped records."""

    payload = auto_match_request_schema.load(json_body())
    service = AutoMatchService(ctx=service_context())
    suggestions = run_service(service, service.suggest, payload["unmapped"])
    return json_response({"data": suggestion_list_schema.dump(suggestions)})


@bp.post("/resolve")
@timing
def resolve():
    """Return effective contribution tables for the posted exercise IDs."""

    payload = resolve_request_schema.load(json_body())
    service = MappingResolverService(user_mappings=payload["user_mappings"], ctx=service_context())
    resolved = run_service(service, service.resolve, payload["exercise_ids"])
    data = {
        exercise_id: {muscle.value: weight for muscle, weight in table.items()}
        for exercise_id, table in resolved.items()
    }
    return json_response({"data": data})
