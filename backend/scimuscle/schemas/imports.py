"""CSV import schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, fields, post_load

from scimuscle.models.workout import SetType
from scimuscle.schemas.mapping import AutoMatchSuggestionSchema, UnmappedExerciseSchema
from scimuscle.services._shared.normalization import normalize_id
from scimuscle.services.imports.csv_parser import workout_id_for
from scimuscle.services.imports.dto import ParsedSet, ParsedWorkout


class ParsedSetSchema(Schema):
    """An imported set; loads into :class:`ParsedSet`."""

    exercise_id = fields.String(load_default=None)
    original_name = fields.String(required=True)
    set_type = fields.Enum(SetType, by_value=True, load_default=SetType.NORMAL)
    weight = fields.Float(load_default=0.0)
    reps = fields.Integer(load_default=0)
    rpe = fields.Float(load_default=None, allow_none=True)

    @post_load
    def make_set(self, data: dict[str, Any], **_: Any) -> ParsedSet:
        if not data.get("exercise_id"):
            data["exercise_id"] = normalize_id(data["original_name"])
        return ParsedSet(**data)


class ParsedWorkoutSchema(Schema):
    """An imported workout; ``id`` defaults to the one the parser would assign."""

    id = fields.String(load_default=None)
    date = fields.DateTime(required=True)
    title = fields.String(load_default="")
    sets = fields.List(fields.Nested(ParsedSetSchema), load_default=list)

    @post_load
    def make_workout(self, data: dict[str, Any], **_: Any) -> ParsedWorkout:
        workout_id = data["id"] or workout_id_for(data["date"])
        return ParsedWorkout(
            id=workout_id, date=data["date"], title=data["title"], sets=tuple(data["sets"])
        )


class ImportSummarySchema(Schema):
    format = fields.String(required=True)
    set_count = fields.Integer()
    workouts = fields.List(fields.Nested(ParsedWorkoutSchema))
    unmapped = fields.List(fields.Nested(UnmappedExerciseSchema))
    suggestions = fields.List(fields.Nested(AutoMatchSuggestionSchema))
