"""API tests for the canonical exercise endpoints."""

from __future__ import annotations

import pytest

from tests.helpers.assertions import assert_problem


class TestExercisesAPI:
    """List and search endpoints."""

    def test_list(self, client, canonical):
        response = client.get("/api/v1/exercises")
        assert response.status_code == 200
        body = response.get_json()
        assert body["meta"]["total"] == len(canonical)
        first = body["data"][0]
        assert first["id"] == "bench-press"
        assert first["name"] == "Bench Press"
        assert first["contributions"]["Pectoralis Major (Sternal)"] == 1.0

    def test_search(self, client):
        response = client.get("/api/v1/exercises/search", query_string={"q": "bench press"})
        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data[0]["name"] == "Bench Press"
        assert data[0]["score"] == pytest.approx(1.0)

    def test_search_default_limit(self, client):
        data = client.get("/api/v1/exercises/search?q=press").get_json()["data"]
        assert len(data) == 10

    def test_search_limit_is_capped(self, client, canonical):
        data = client.get("/api/v1/exercises/search?q=e&limit=500").get_json()["data"]
        assert len(data) <= 50

    def test_blank_query(self, client):
        body = client.get("/api/v1/exercises/search").get_json()
        assert body == {"data": [], "meta": {"total": 0}}

    def test_invalid_limit(self, client):
        body = assert_problem(
            client.get("/api/v1/exercises/search?q=row&limit=0"), 422, "validation_error"
        )
        assert "limit" in body["details"]["errors"]
