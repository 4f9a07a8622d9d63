"""Common Marshmallow fields and schemas shared across resources."""

from __future__ import annotations

from enum import Enum
from typing import Any

from marshmallow import EXCLUDE, Schema, fields, validate

from scimuscle.models.taxonomy import FunctionalGroup, ScientificMuscle


class MuscleName(fields.String):
    """String field that renders enum members by their display value."""

    def _serialize(self, value: Any, attr: str | None, obj: Any, **kwargs: Any) -> str | None:
        if isinstance(value, Enum):
            value = value.value
        return super()._serialize(value, attr, obj, **kwargs)


def muscle_field(**kwargs: Any) -> fields.Enum:
    """Strict muscle field: unknown display names fail validation."""
    return fields.Enum(ScientificMuscle, by_value=True, **kwargs)


def group_field(**kwargs: Any) -> fields.Enum:
    return fields.Enum(FunctionalGroup, by_value=True, **kwargs)


def contributions_field(**kwargs: Any) -> fields.Dict:
    """Muscle -> weight table with weights in ``[0, 1]``."""
    return fields.Dict(
        keys=muscle_field(),
        values=fields.Float(validate=validate.Range(min=0.0, max=1.0)),
        **kwargs,
    )


class ProfileQuerySchema(Schema):
    """Optional ``profile_id`` query parameter used for log correlation."""

    class Meta:
        unknown = EXCLUDE

    profile_id = fields.String(load_default=None, validate=validate.Length(min=1, max=120))
