import logging

from fastapi import APIRouter
from fastapi.responses import FileResponse, Response

from flopapi.api.deps import AppSettings
from flopapi.api.responses import error_response
from flopapi.config import Settings
from flopapi.constants import NO_CACHE_HEADERS
from flopapi.schemas import ErrorResponse
from flopapi.services.local_images import LocalImageError, pick_random_image

logger = logging.getLogger(__name__)

router = APIRouter(tags=["floppa"])


@router.get("/floppapi", response_class=FileResponse, responses={500: {"model": ErrorResponse}})
def random_local_image(settings: Settings = AppSettings) -> Response:
    try:
        path = pick_random_image(settings.image_dir)
    except LocalImageError as exc:
        logger.error("Local image pick failed: %s", exc)
        return error_response(exc)
    return FileResponse(path, headers=NO_CACHE_HEADERS)
