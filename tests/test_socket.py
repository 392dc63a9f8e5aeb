"""Tests for the realtime discovery route."""
import re

from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)

ISO_MILLIS = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def test_socket_info():
    response = client.get("/api/socket")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["message"] == "Socket.io is available at /api/socketio"
    assert ISO_MILLIS.match(data["timestamp"])


def test_socket_info_headers():
    response = client.get("/api/socket")

    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, POST, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "Content-Type, Authorization"
    assert response.headers["cache-control"] == "no-store, max-age=0"
    assert response.headers["content-type"].startswith("application/json")


def test_socket_preflight():
    response = client.options("/api/socket")

    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, POST, OPTIONS"
    assert response.headers["access-control-max-age"] == "86400"


def test_browser_preflight_reaches_socket_route():
    response = client.options(
        "/api/socket",
        headers={
            "Origin": "https://mini.app",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, POST, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "Content-Type, Authorization"
    assert response.headers["access-control-max-age"] == "86400"


def test_browser_preflight_elsewhere_still_handled_by_cors_middleware():
    response = client.options(
        "/api/admin/check",
        headers={
            "Origin": "https://mini.app",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-max-age"] == "600"
