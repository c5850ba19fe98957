"""Shared fixtures for API integration tests.

Uses FastAPI TestClient (in-memory, no network) so tests run
without a live server or external dependencies.
"""

from __future__ import annotations

import os
import sys

import pytest

# Ensure project root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Config overrides from the environment must not leak into tests
for _name in ("DEMAND_SUCCESS_DESTINATION", "DEMAND_TITLE_MIN_LENGTH", "DEMAND_DESCRIPTION_MIN_LENGTH"):
    os.environ.pop(_name, None)


@pytest.fixture(autouse=True)
def _reset_in_memory_state():
    """Clear in-memory stores before each test for isolation."""
    from services.api.app import db, sessions

    db._mem_demands.clear()
    sessions._sessions.clear()
    yield


@pytest.fixture()
def client():
    """FastAPI TestClient — no network, no server startup needed."""
    from fastapi.testclient import TestClient

    from services.api.app.main import app

    return TestClient(app)


@pytest.fixture()
def sample_session(client):
    """Open a wizard session and return its id."""
    resp = client.post("/v1/wizard/sessions")
    assert resp.status_code == 201
    return resp.json()["session_id"]


@pytest.fixture()
def confirmed_session(client, sample_session):
    """A session with valid basic info that sits on the confirmation step."""
    resp = client.patch(
        f"/v1/wizard/sessions/{sample_session}/fields",
        json={
            "title": "需要开发一个企业官网",
            "description": "公司需要一个响应式企业官网，包含产品展示和后台内容管理功能。",
            "category": "软件开发",
        },
    )
    assert resp.status_code == 200
    for _ in range(2):
        resp = client.post(f"/v1/wizard/sessions/{sample_session}/next")
        assert resp.json()["moved"] is True
    return sample_session
