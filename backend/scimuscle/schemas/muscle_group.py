"""Muscle group configuration schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, ValidationError, fields, post_load, validate, validates_schema

from scimuscle.models.muscle_group import (
    Bucket,
    CustomMuscleGroup,
    GroupTarget,
    MuscleGroupConfig,
)
from scimuscle.models.taxonomy import coerce_muscle
from scimuscle.schemas.common import MuscleName, muscle_field


def _muscles(values: list[str]) -> tuple[str, ...]:
    return tuple(coerce_muscle(v) for v in values)


class CustomMuscleGroupSchema(Schema):
    id = fields.String(required=True, validate=validate.Length(min=1))
    name = fields.String(required=True, validate=validate.Length(min=1, max=60))
    muscles = fields.List(MuscleName(), load_default=list)

    @post_load
    def make_group(self, data: dict[str, Any], **_: Any) -> CustomMuscleGroup:
        return CustomMuscleGroup(id=data["id"], name=data["name"], muscles=_muscles(data["muscles"]))


class MuscleGroupConfigSchema(Schema):
    """
    Muscle group configuration.

    Muscle names are not checked on load so that the validation endpoint can
    report unknown values alongside the other violations.
    """

    groups = fields.List(fields.Nested(CustomMuscleGroupSchema), load_default=list)
    ungrouped = fields.List(MuscleName(), load_default=list)
    hidden = fields.List(MuscleName(), load_default=list)

    @post_load
    def make_config(self, data: dict[str, Any], **_: Any) -> MuscleGroupConfig:
        return MuscleGroupConfig(
            groups=tuple(data["groups"]),
            ungrouped=_muscles(data["ungrouped"]),
            hidden=_muscles(data["hidden"]),
        )


class ValidationResultSchema(Schema):
    valid = fields.Boolean(required=True)
    errors = fields.List(fields.String(), required=True)


class MoveTargetSchema(Schema):
    """``{"type": "group", "group_id": ...}``, ``{"type": "ungrouped"}`` or ``{"type": "hidden"}``."""

    type = fields.String(
        required=True, validate=validate.OneOf(["group", Bucket.UNGROUPED.value, Bucket.HIDDEN.value])
    )
    group_id = fields.String(load_default=None)

    @validates_schema
    def require_group_id(self, data: dict[str, Any], **_: Any) -> None:
        if data.get("type") == "group" and not data.get("group_id"):
            raise ValidationError("group_id is required for group targets", field_name="group_id")

    @post_load
    def make_target(self, data: dict[str, Any], **_: Any) -> GroupTarget | Bucket:
        if data["type"] == "group":
            return GroupTarget(group_id=data["group_id"])
        return Bucket(data["type"])


class ConfigRequestSchema(Schema):
    """Body carrying the current configuration (defaults when omitted)."""

    config = fields.Nested(MuscleGroupConfigSchema, load_default=None, allow_none=True)


class MoveRequestSchema(ConfigRequestSchema):
    muscle = muscle_field(required=True)
    target = fields.Nested(MoveTargetSchema, required=True)


class AddGroupRequestSchema(ConfigRequestSchema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=60))
    id = fields.String(load_default=None, validate=validate.Length(min=1))


class RenameGroupRequestSchema(ConfigRequestSchema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=60))


class ReorderRequestSchema(ConfigRequestSchema):
    group_id = fields.String(required=True)
    index = fields.Integer(required=True, validate=validate.Range(min=0))
