"""Canonical exercise schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, validate

from scimuscle.schemas.common import contributions_field


class CanonicalExerciseSchema(Schema):
    """Representation of a canonical exercise (``score`` is 1.0 outside search)."""

    id = fields.String(required=True)
    name = fields.String(required=True)
    score = fields.Float(required=True)
    contributions = contributions_field(required=True)


class ExerciseSearchQuerySchema(Schema):
    """Query parameters of the search endpoint."""

    class Meta:
        unknown = EXCLUDE

    q = fields.String(load_default="")
    limit = fields.Integer(validate=validate.Range(min=1))

    def __init__(self, *, default_limit: int = 10, max_limit: int = 50, **kwargs: Any) -> None:
        self._default_limit = default_limit
        self._max_limit = max_limit
        super().__init__(**kwargs)

    def load_query(self, args: Any) -> dict[str, Any]:
        data = self.load(args)
        limit = data.get("limit", self._default_limit)
        data["limit"] = min(limit, self._max_limit)
        return data
