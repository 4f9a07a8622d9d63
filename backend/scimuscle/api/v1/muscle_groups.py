"""Muscle group configuration endpoints.

The API is stateless: every request carries the configuration to operate on
(the default configuration when omitted) and the response returns the new
validated configuration for the caller to persist.
"""

from __future__ import annotations

from flask import Blueprint

from scimuscle.api.deps import json_body, json_response, run_service, service_context, timing
from scimuscle.models.muscle_group import MuscleGroupConfig
from scimuscle.schemas import (
    AddGroupRequestSchema,
    ConfigRequestSchema,
    MoveRequestSchema,
    MuscleGroupConfigSchema,
    RenameGroupRequestSchema,
    ReorderRequestSchema,
    ValidationResultSchema,
)
from scimuscle.services.muscle_groups.engine import MAX_GROUPS, effective_config
from scimuscle.services.muscle_groups.service import MuscleGroupService

bp = Blueprint("muscle_groups", __name__)

config_schema = MuscleGroupConfigSchema()
config_request_schema = ConfigRequestSchema()
move_request_schema = MoveRequestSchema()
add_group_request_schema = AddGroupRequestSchema()
rename_group_request_schema = RenameGroupRequestSchema()
reorder_request_schema = ReorderRequestSchema()
validation_result_schema = ValidationResultSchema()


def _config_response(config: MuscleGroupConfig, *, status: int = 200):
    return json_response({"data": config_schema.dump(config)}, status=status)


@bp.get("/default")
@timing
def default_config():
    """Return the default Push/Pull/Legs/Core configuration."""

    service = MuscleGroupService(ctx=service_context())
    body = {"data": config_schema.dump(service.default()), "meta": {"max_groups": MAX_GROUPS}}
    return json_response(body)


@bp.post("/validate")
@timing
def validate_config():
    """Report every invariant violation of the posted configuration."""

    payload = config_request_schema.load(json_body())
    service = MuscleGroupService(ctx=service_context())
    result = service.validate(effective_config(payload["config"]))
    return json_response({"data": validation_result_schema.dump(result)})


@bp.post("/move")
@timing
def move_muscle():
    payload = move_request_schema.load(json_body())
    service = MuscleGroupService(ctx=service_context())
    config = run_service(
        service,
        service.move,
        effective_config(payload["config"]),
        payload["muscle"],
        payload["target"],
    )
    return _config_response(config)


@bp.post("/groups")
@timing
def add_group():
    payload = add_group_request_schema.load(json_body())
    service = MuscleGroupService(ctx=service_context())
    config = run_service(
        service,
        service.add_group,
        effective_config(payload["config"]),
        payload["name"],
        group_id=payload["id"],
    )
    return _config_response(config, status=201)


@bp.patch("/groups/<group_id>")
@timing
def rename_group(group_id: str):
    payload = rename_group_request_schema.load(json_body())
    service = MuscleGroupService(ctx=service_context())
    config = run_service(
        service,
        service.rename_group,
        effective_config(payload["config"]),
        group_id,
        payload["name"],
    )
    return _config_response(config)


@bp.delete("/groups/<group_id>")
@timing
def delete_group(group_id: str):
    """Delete a group; its muscles move to ``ungrouped``."""

    payload = config_request_schema.load(json_body())
    service = MuscleGroupService(ctx=service_context())
    config = run_service(
        service, service.delete_group, effective_config(payload["config"]), group_id
    )
    return _config_response(config)


@bp.post("/reorder")
@timing
def reorder_groups():
    payload = reorder_request_schema.load(json_body())
    service = MuscleGroupService(ctx=service_context())
    config = run_service(
        service,
        service.reorder_groups,
        effective_config(payload["config"]),
        payload["group_id"],
        payload["index"],
    )
    return _config_response(config)
