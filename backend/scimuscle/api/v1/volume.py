"""Volume statistics endpoint."""

from __future__ import annotations

from datetime import date

from flask import Blueprint

from scimuscle.api.deps import json_body, json_response, run_service, service_context, timing
from scimuscle.schemas import (
    DailyActivityRequestSchema,
    DailyActivitySchema,
    VolumeRequestSchema,
    VolumeStatItemSchema,
    VolumeSummarySchema,
)
from scimuscle.services.mappings.resolver import resolve_exercise_mappings
from scimuscle.services.volume.service import VolumeStatsService

bp = Blueprint("volume", __name__)

volume_request_schema = VolumeRequestSchema()
volume_summary_schema = VolumeSummarySchema()
stat_list_schema = VolumeStatItemSchema(many=True)
daily_request_schema = DailyActivityRequestSchema()
daily_list_schema = DailyActivitySchema(many=True)


@bp.post("")
@timing
def volume_stats():
    """
    Compute per-muscle and per-group statistics for the posted sets.

    When ``group`` is given, the response also carries that group's
    per-muscle breakdown.
    """

    payload = volume_request_schema.load(json_body())
    sets = payload["sets"]
    mappings = resolve_exercise_mappings({s.exercise_id for s in sets}, payload["user_mappings"])
    service = VolumeStatsService(
        goals=payload["goals"],
        customization=payload["customization"],
        total_goal=payload["total_goal"],
        ctx=service_context(),
    )
    summary = run_service(service, service.summary, sets, mappings)
    body = {"data": volume_summary_schema.dump(summary)}
    if payload["group"] is not None:
        breakdown = service.group_breakdown(payload["group"], sets, mappings)
        body["breakdown"] = stat_list_schema.dump(breakdown)
    return json_response(body)


@bp.post("/daily")
@timing
def daily_activity():
    """Per-day set counts for the week (or last seven days) around ``today``."""

    payload = daily_request_schema.load(json_body())
    workouts = payload["workouts"]
    exercise_ids = {s.exercise_id for w in workouts for s in w.sets}
    mappings = resolve_exercise_mappings(exercise_ids, payload["user_mappings"])
    service = VolumeStatsService(customization=payload["customization"], ctx=service_context())
    days = run_service(
        service,
        service.daily,
        workouts,
        mappings,
        today=payload["today"] or date.today(),
        window=payload["window"],
    )
    return json_response({"data": daily_list_schema.dump(days)})
