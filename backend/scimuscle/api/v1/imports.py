"""Workout CSV import endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from scimuscle.api.deps import json_response, run_service, service_context, timing
from scimuscle.core.errors import APIError
from scimuscle.schemas import ImportSummarySchema, ProfileQuerySchema, UserExerciseMappingSchema
from scimuscle.schemas.mapping import UnmappedExerciseSchema
from scimuscle.services.imports.service import CsvImportService

bp = Blueprint("imports", __name__)

import_query_schema = ProfileQuerySchema()
import_summary_schema = ImportSummarySchema()
unmapped_list_schema = UnmappedExerciseSchema(many=True)
user_mapping_list_schema = UserExerciseMappingSchema(many=True)


def _read_csv() -> tuple[str, dict]:
    """
    Return the CSV text and the optional JSON context.

    Accepts ``text/csv`` bodies, a multipart ``file`` upload (with optional
    ``unmapped``/``user_mappings`` JSON form fields) or a JSON object with a
    ``csv`` key.
    """
    max_bytes = current_app.config.get("MAX_CSV_BYTES", 5 * 1024 * 1024)
    if request.content_length is not None and request.content_length > max_bytes:
        raise APIError("CSV export too large", status_code=413, code="payload_too_large")

    if request.is_json:
        payload = request.get_json(silent=True) or {}
        return str(payload.get("csv") or ""), payload
    if "file" in request.files:
        raw = request.files["file"].read(max_bytes + 1)
        if len(raw) > max_bytes:
            raise APIError("CSV export too large", status_code=413, code="payload_too_large")
        context = {}
        for key in ("unmapped", "user_mappings"):
            if key in request.form:
                try:
                    context[key] = current_app.json.loads(request.form[key])
                except ValueError as exc:
                    raise APIError(f"Invalid JSON in form field {key!r}") from exc
        try:
            return raw.decode("utf-8-sig"), context
        except UnicodeDecodeError as exc:
            raise APIError("CSV export must be UTF-8", status_code=400, code="bad_request") from exc
    return request.get_data(as_text=True), {}


@bp.post("/csv")
@timing
def import_csv():
    """Parse an export and report workouts, unmapped names and suggestions."""

    import_query_schema.load(request.args)
    text, context = _read_csv()
    if not text.strip():
        raise APIError("Empty CSV payload", status_code=400, code="bad_request")
    existing = unmapped_list_schema.load(context.get("unmapped") or [])
    user_mappings = user_mapping_list_schema.load(context.get("user_mappings") or [])
    service = CsvImportService(user_mappings=user_mappings, ctx=service_context())
    summary = run_service(service, service.import_csv, text, existing_unmapped=existing)
    return json_response({"data": import_summary_schema.dump(summary)})
