"""API tests for auto-match and mapping resolution."""

from __future__ import annotations

import pytest

from tests.helpers.assertions import assert_problem


class TestAutoMatchAPI:
    def test_suggestions(self, client):
        payload = {
            "unmapped": [
                {"original_name": "Lateral raise Domar", "occurrence_count": 4},
                {"original_name": "Completely Random Exercise XYZ123"},
            ]
        }
        response = client.post("/api/v1/mappings/auto-match", json=payload)
        assert response.status_code == 200
        (suggestion,) = response.get_json()["data"]
        assert suggestion["suggested_canonical_id"] == "lateral-raise"
        assert suggestion["unmapped_normalized_name"] == "lateral-raise-domar"
        assert suggestion["confidence"] == pytest.approx(1.0)
        assert suggestion["match_reason"] == "Core words match: lateral, raise"

    def test_missing_body(self, client):
        body = assert_problem(client.post("/api/v1/mappings/auto-match", json={}), 422)
        assert "unmapped" in body["details"]["errors"]


class TestResolveAPI:
    def test_resolve(self, client):
        payload = {
            "exercise_ids": ["bench-press", "my-lateral", "skip", "unknown"],
            "user_mappings": [
                {"original_pattern": "my-lateral", "canonical_exercise_id": "lateral-raise"},
                {"original_pattern": "skip", "is_ignored": True},
            ],
        }
        response = client.post("/api/v1/mappings/resolve", json=payload)
        assert response.status_code == 200
        data = response.get_json()["data"]
        assert set(data) == {"bench-press", "my-lateral"}
        assert data["my-lateral"] == {
            "Lateral Deltoid": 1.0,
            "Anterior Deltoid": 0.25,
            "Upper Trapezius": 0.25,
        }

    def test_custom_values(self, client):
        payload = {
            "exercise_ids": ["odd-curl"],
            "user_mappings": [
                {"original_pattern": "odd-curl", "custom_muscle_values": {"Biceps Brachii": 0.75}}
            ],
        }
        data = client.post("/api/v1/mappings/resolve", json=payload).get_json()["data"]
        assert data == {"odd-curl": {"Biceps Brachii": 0.75}}

    def test_mapping_without_mode(self, client):
        payload = {"exercise_ids": ["x"], "user_mappings": [{"original_pattern": "x"}]}
        assert_problem(client.post("/api/v1/mappings/resolve", json=payload), 422, "validation_error")

    def test_unknown_muscle(self, client):
        payload = {
            "exercise_ids": ["x"],
            "user_mappings": [{"original_pattern": "x", "custom_muscle_values": {"Neck": 1.0}}],
        }
        assert_problem(client.post("/api/v1/mappings/resolve", json=payload), 422, "validation_error")
