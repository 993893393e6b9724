import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from flopapi.api.routes import floppa, macka
from flopapi.config import AppConfig, Settings, get_settings
from flopapi.services.pocketbase import PocketBaseClient
from flopapi.web.routes import mount_frontend

logger = logging.getLogger(__name__)


def create_app(
    config: AppConfig,
    settings: Settings | None = None,
    pocketbase: PocketBaseClient | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if pocketbase is not None:
            app.state.pocketbase = pocketbase
            yield
            return

        # owned by the app, closed on shutdown
        async with PocketBaseClient(config.pocketbase_url, timeout=settings.http_timeout_seconds) as client:
            app.state.pocketbase = client
            yield

    app = FastAPI(
        title="flopapi",
        version="0.1.0",
        description="Random floppa images from disk and random cats from PocketBase.",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.settings = settings

    if not mount_frontend(app, settings.frontend_dist):
        logger.info("No frontend bundle at %s, skipping static mounts", settings.frontend_dist)

    app.include_router(floppa.router)
    app.include_router(macka.router)
    return app
