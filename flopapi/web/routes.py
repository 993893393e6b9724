from pathlib import Path

from fastapi import APIRouter, FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles


def mount_frontend(app: FastAPI, dist: Path) -> bool:
    """Serve the built frontend bundle, if one exists under ``dist``."""
    index = dist / "index.html"
    assets = dist / "assets"
    if not index.is_file():
        return False

    if assets.is_dir():
        app.mount("/assets", StaticFiles(directory=assets), name="assets")

    router = APIRouter(tags=["web"])

    @router.get("/", include_in_schema=False)
    def index_page() -> FileResponse:
        return FileResponse(index)

    app.include_router(router)
    return True
