"""Smoke tests for the API blueprint wiring."""

from __future__ import annotations

from tests.helpers.assertions import assert_json_keys, assert_problem


def test_health_endpoint(client, canonical):
    """Health check should report the loaded catalog."""

    response = client.get("/api/v1/health")
    assert response.status_code == 200
    payload = response.get_json()
    assert_json_keys(payload, {"status", "catalog", "exercises", "version"})
    assert payload["status"] == "ok"
    assert payload["exercises"] == len(canonical)


def test_unknown_route_is_problem_json(client):
    """Unknown routes use the RFC 7807 envelope."""

    body = assert_problem(client.get("/api/v1/nope"), 404, "not_found")
    assert body["detail"] == "Route '/api/v1/nope' not found"


def test_wrong_method(client):
    assert_problem(client.get("/api/v1/volume"), 405, "method_not_allowed")
