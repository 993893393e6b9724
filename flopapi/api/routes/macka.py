import logging

from fastapi import APIRouter, BackgroundTasks
from fastapi.responses import Response

from flopapi.api.deps import AppSettings, PocketBase
from flopapi.api.responses import error_response
from flopapi.config import Settings
from flopapi.constants import NO_CACHE_HEADERS, REMOTE_IMAGE_MEDIA_TYPE
from flopapi.schemas import CountResponse, ErrorResponse
from flopapi.services.pocketbase import PocketBaseClient, PocketBaseError
from flopapi.services.views import schedule_view_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/macka", tags=["macka"])


@router.get(
    "",
    response_class=Response,
    responses={200: {"content": {REMOTE_IMAGE_MEDIA_TYPE: {}}}, 500: {"model": ErrorResponse}},
)
async def random_remote_image(
    background_tasks: BackgroundTasks,
    client: PocketBaseClient = PocketBase,
    settings: Settings = AppSettings,
) -> Response:
    try:
        data, record = await client.fetch_random_image(settings.collection)
    except PocketBaseError as exc:
        logger.error("Remote image fetch failed: %s", exc)
        return error_response(exc)

    schedule_view_update(
        background_tasks,
        client,
        settings.collection,
        record,
        timeout=settings.view_update_timeout_seconds,
    )
    return Response(content=data, media_type=REMOTE_IMAGE_MEDIA_TYPE, headers=NO_CACHE_HEADERS)


@router.get("/count", response_model=CountResponse, responses={500: {"model": ErrorResponse}})
async def collection_count(client: PocketBaseClient = PocketBase, settings: Settings = AppSettings):
    try:
        count = await client.count_items(settings.collection)
    except PocketBaseError as exc:
        logger.error("Collection count failed: %s", exc)
        return error_response(exc)
    return CountResponse(count=count)
