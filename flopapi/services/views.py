import logging

from fastapi import BackgroundTasks

from flopapi.constants import DEFAULT_VIEW_UPDATE_TIMEOUT_SECONDS
from flopapi.schemas import Record
from flopapi.services.pocketbase import PocketBaseClient, PocketBaseError

logger = logging.getLogger(__name__)


async def record_view(
    client: PocketBaseClient,
    collection: str,
    record_id: str,
    views: int,
    *,
    timeout: float = DEFAULT_VIEW_UPDATE_TIMEOUT_SECONDS,
) -> None:
    """Bump the view counter of one record; failures are logged, never raised."""
    try:
        new_views = await client.update_views(collection, record_id, views, timeout=timeout)
    except PocketBaseError as exc:
        logger.warning("Failed to update views for record %s: %s", record_id, exc)
        return
    logger.debug("Record %s now at %d views", record_id, new_views)


def schedule_view_update(
    background_tasks: BackgroundTasks,
    client: PocketBaseClient,
    collection: str,
    record: Record,
    *,
    timeout: float = DEFAULT_VIEW_UPDATE_TIMEOUT_SECONDS,
) -> None:
    # runs after the response is sent; uses the count seen at fetch time
    background_tasks.add_task(record_view, client, collection, record.id, record.views, timeout=timeout)
