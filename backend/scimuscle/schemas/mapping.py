"""Schemas for unmapped exercises, user mappings and auto-match."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, ValidationError, fields, post_load, validate

from scimuscle.models.mapping import UnmappedExercise, UserExerciseMapping
from scimuscle.schemas.common import contributions_field
from scimuscle.services._shared.normalization import normalize_id


class UnmappedExerciseSchema(Schema):
    """Unmapped exercise record; loads into :class:`UnmappedExercise`."""

    profile_id = fields.String(load_default="")
    original_name = fields.String(required=True)
    normalized_name = fields.String(load_default="")
    first_seen_at = fields.DateTime(load_default=None, allow_none=True)
    occurrence_count = fields.Integer(load_default=1, validate=validate.Range(min=0))

    @post_load
    def make_record(self, data: dict[str, Any], **_: Any) -> UnmappedExercise:
        data["normalized_name"] = data["normalized_name"] or normalize_id(data["original_name"])
        return UnmappedExercise(**data)


class UserExerciseMappingSchema(Schema):
    """
    User mapping in its stored nullable-field encoding.

    Exactly one of ``is_ignored``, ``custom_muscle_values`` and
    ``canonical_exercise_id`` is emitted on dump.
    """

    profile_id = fields.String(load_default="")
    original_pattern = fields.String(required=True, validate=validate.Length(min=1))
    custom_muscle_values = contributions_field(load_default=None, allow_none=True)
    canonical_exercise_id = fields.String(load_default=None, allow_none=True)
    is_ignored = fields.Boolean(load_default=False)
    created_at = fields.DateTime(load_default=None, allow_none=True)

    @post_load
    def make_mapping(self, data: dict[str, Any], **_: Any) -> UserExerciseMapping:
        try:
            return UserExerciseMapping.from_fields(
                data["profile_id"],
                data["original_pattern"],
                custom_muscle_values=data["custom_muscle_values"],
                canonical_exercise_id=data["canonical_exercise_id"],
                is_ignored=data["is_ignored"],
                created_at=data["created_at"],
            )
        except ValueError as exc:
            raise ValidationError(str(exc), field_name="_schema") from exc


class AutoMatchSuggestionSchema(Schema):
    unmapped_exercise_name = fields.String(required=True)
    unmapped_normalized_name = fields.String(required=True)
    suggested_canonical_id = fields.String(required=True)
    suggested_canonical_name = fields.String(required=True)
    confidence = fields.Float(required=True)
    match_reason = fields.String(required=True)


class AutoMatchRequestSchema(Schema):
    unmapped = fields.List(fields.Nested(UnmappedExerciseSchema), required=True)


class ResolveRequestSchema(Schema):
    """Body of the resolve endpoint."""

    exercise_ids = fields.List(fields.String(), required=True)
    user_mappings = fields.List(fields.Nested(UserExerciseMappingSchema), load_default=list)
