"""App Routes — index page, static assets, health checks and store-failure mapping."""

import logging
from uuid import uuid4

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

import exercise_tracker.infrastructure.database as db_module


async def test_index_serves_html(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert "Exercise tracker" in res.text


async def test_static_stylesheet(client):
    res = await client.get("/public/style.css")
    assert res.status_code == 200


async def test_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database(client):
    db_module.db_manager = None
    res = await client.get("/api/health/ready")
    assert res.status_code == 503


async def test_store_failure_maps_to_503(client, monkeypatch):
    async def failing_execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    monkeypatch.setattr(AsyncSession, "execute", failing_execute)
    res = await client.get("/api/users")
    assert res.status_code == 503
    assert res.json() == {
        "error": "Database query failed: Could not list users",
        "code": "DATABASE_ERROR",
    }


async def test_domain_error_logged_with_category(client, caplog):
    with caplog.at_level(logging.WARNING, logger="exercise_tracker.api.error_handlers"):
        res = await client.get(f"/api/users/{uuid4()}/logs")
    assert res.status_code == 404
    record = next(r for r in caplog.records if r.name == "exercise_tracker.api.error_handlers")
    assert record.error_code == "RESOURCE_NOT_FOUND"
    assert record.error_category == "resource_not_found"
    assert record.occurred_at
