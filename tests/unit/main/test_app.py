from __future__ import annotations

import pytest
from dependency_injector import providers

from src.main import app as module_app
from src.main.app import create_app
from src.main.container import get_container
from tests.conftest import FakeMongoDatabase


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app()
    assert app.title

    database = FakeMongoDatabase()
    get_container().mongo_database.override(providers.Object(database))

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert app.state.container.mongo_database() is database
        assert app.state.container.change_notifier().running is True

    assert database.client.closed is True
    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))


def test_routes_are_mounted_under_api_prefix() -> None:
    paths = {getattr(route, "path", None) for route in create_app().routes}

    assert "/api/v1/ping" in paths
    assert "/api/v1/device/name/{name}" in paths
    assert "/api/v1/deviceprofile/uploadfile" in paths
    assert "/api/v1/devicereport/valueDescriptorsFor/{device_name}" in paths
    assert "/api/v1/provisionwatcher/identifier/{key}/{value}" in paths
