"""Volume statistics schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, fields, post_load, validate

from scimuscle.models.workout import SetType, WorkoutSet
from scimuscle.schemas.common import group_field, muscle_field
from scimuscle.schemas.imports import ParsedWorkoutSchema
from scimuscle.schemas.mapping import UserExerciseMappingSchema
from scimuscle.services.volume.dto import ActivityWindow


class WorkoutSetSchema(Schema):
    """A logged set; loads into :class:`WorkoutSet`."""

    exercise_id = fields.String(required=True)
    set_type = fields.Enum(SetType, by_value=True, load_default=SetType.NORMAL)
    weight = fields.Float(load_default=0.0)
    reps = fields.Integer(load_default=0, validate=validate.Range(min=0))
    rpe = fields.Float(load_default=None, allow_none=True)

    @post_load
    def make_set(self, data: dict[str, Any], **_: Any) -> WorkoutSet:
        return WorkoutSet(**data)


class VolumeRequestSchema(Schema):
    """Sets plus the profile data needed to resolve and aggregate them."""

    sets = fields.List(fields.Nested(WorkoutSetSchema), required=True)
    user_mappings = fields.List(fields.Nested(UserExerciseMappingSchema), load_default=list)
    goals = fields.Dict(
        keys=muscle_field(),
        values=fields.Float(validate=validate.Range(min=0)),
        load_default=dict,
    )
    customization = fields.Dict(keys=muscle_field(), values=group_field(), load_default=dict)
    total_goal = fields.Float(load_default=None, allow_none=True, validate=validate.Range(min=0))
    group = group_field(load_default=None, allow_none=True)


class VolumeStatItemSchema(Schema):
    name = fields.String(required=True)
    volume = fields.Float(required=True)
    goal = fields.Float(required=True)
    percentage = fields.Float(required=True)


class VolumeSummarySchema(Schema):
    muscles = fields.List(fields.Nested(VolumeStatItemSchema), required=True)
    groups = fields.List(fields.Nested(VolumeStatItemSchema), required=True)
    total_sets = fields.Integer(required=True)
    total_goal = fields.Float(required=True)


class DailyActivityRequestSchema(Schema):
    """Imported workouts plus the chart window; ``today`` defaults to the server date."""

    workouts = fields.List(fields.Nested(ParsedWorkoutSchema), required=True)
    user_mappings = fields.List(fields.Nested(UserExerciseMappingSchema), load_default=list)
    customization = fields.Dict(keys=muscle_field(), values=group_field(), load_default=dict)
    window = fields.Enum(ActivityWindow, by_value=True, load_default=ActivityWindow.CALENDAR_WEEK)
    today = fields.Date(load_default=None, allow_none=True)


class DailyExerciseSchema(Schema):
    name = fields.String(required=True)
    sets = fields.Integer(required=True)
    groups = fields.List(group_field())


class DailyWorkoutSchema(Schema):
    id = fields.String(required=True)
    title = fields.String()
    exercises = fields.List(fields.Nested(DailyExerciseSchema))


class DailyActivitySchema(Schema):
    date = fields.Date(required=True)
    day_label = fields.String(required=True)
    total_sets = fields.Integer(required=True)
    workouts = fields.List(fields.Nested(DailyWorkoutSchema))
