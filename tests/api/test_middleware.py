"""Tests for RequestIDMiddleware."""

import logging
from uuid import UUID

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.testclient import TestClient

from api.middleware import RequestIDMiddleware


@pytest.fixture
def app():
    """Minimal FastAPI app with RequestIDMiddleware."""
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/probe")
    async def probe(request: Request):
        return JSONResponse({"request_id": request.state.request_id})

    return app


@pytest.fixture
def client(app):
    return TestClient(app)


class TestRequestIDMiddleware:

    def test_response_has_request_id_header(self, client):
        response = client.get("/probe")
        UUID(response.headers["X-Request-ID"])

    def test_request_state_matches_header(self, client):
        response = client.get("/probe")
        assert response.headers["X-Request-ID"] == response.json()["request_id"]

    def test_each_request_gets_unique_id(self, client):
        first = client.get("/probe").headers["X-Request-ID"]
        second = client.get("/probe").headers["X-Request-ID"]
        assert first != second

    def test_logs_outcome(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="api.middleware"):
            response = client.get("/probe")

        assert "GET /probe -> 200" in caplog.text
        assert response.headers["X-Request-ID"] in caplog.text
