"""Tests for the lazy database session dependency."""

from typing import Annotated

import pytest
from fastapi import Depends
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from prefixed_ids.application.services.prefix_registry import PrefixRegistry
from prefixed_ids.domain.exceptions import SqlNotConfiguredException
from prefixed_ids.infrastructure.persistence import database
from prefixed_ids.main import create_app


async def test_get_db_without_database_url_raises() -> None:
    assert database.AsyncSessionLocal is None
    with pytest.raises(SqlNotConfiguredException):
        async for _ in database.get_db():
            pass


async def test_unconfigured_database_maps_to_503() -> None:
    app = create_app(registry=PrefixRegistry())

    @app.get("/needs-db")
    async def needs_db(db: Annotated[AsyncSession, Depends(database.get_db)]) -> dict:
        return {}

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/needs-db")
    assert response.status_code == 503
    assert response.json()["error"] == "SERVICE_UNAVAILABLE"
