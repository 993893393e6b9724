import pytest
from fastapi.testclient import TestClient

from flopapi.config import AppConfig, Settings, get_settings
from flopapi.main import create_app
from flopapi.services.pocketbase import PocketBaseClient
from tests.helpers import POCKETBASE_URL, FakePocketBase


@pytest.fixture(autouse=True)
def reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(pocketbase_url=POCKETBASE_URL)


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        IMAGE_DIR=tmp_path / "floppa",
        FRONTEND_DIST=tmp_path / "frontend" / "dist",
        POCKETBASE_COLLECTION="macky",
    )


@pytest.fixture()
def fake_pocketbase() -> FakePocketBase:
    return FakePocketBase()


@pytest.fixture()
def anyio_backend():
    return "asyncio"


@pytest.fixture()
async def pocketbase(fake_pocketbase):
    async with PocketBaseClient(POCKETBASE_URL, transport=fake_pocketbase.transport()) as client:
        yield client


@pytest.fixture()
def client(app_config, settings, fake_pocketbase):
    pocketbase = PocketBaseClient(POCKETBASE_URL, transport=fake_pocketbase.transport())
    app = create_app(app_config, settings, pocketbase=pocketbase)
    with TestClient(app) as test_client:
        yield test_client
