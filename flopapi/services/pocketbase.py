"""Client for the PocketBase record API.

Every call goes through one shared ``httpx.AsyncClient`` and is bounded by an
overall deadline covering connect, send and the full body read. Any non-200
answer becomes a ``RemoteAPIError`` carrying the status code and the response
body text. There are no retries.
"""

from __future__ import annotations

import logging
from typing import Any

import anyio
import httpx
from pydantic import ValidationError

from flopapi.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from flopapi.schemas import CollectionStats, Record, RecordList

logger = logging.getLogger(__name__)


class PocketBaseError(RuntimeError):
    pass


class RemoteAPIError(PocketBaseError):
    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class EmptyCollection(PocketBaseError):
    pass


class MissingImageField(PocketBaseError):
    pass


def _raise_for_status(response: httpx.Response, label: str) -> None:
    if response.status_code != 200:
        body = response.text
        raise RemoteAPIError(f"{label} {response.status_code}: {body}", status_code=response.status_code, body=body)


class PocketBaseClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def __aenter__(self) -> PocketBaseClient:
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _records_url(self, collection: str) -> str:
        return f"{self.base_url}/api/collections/{collection}/records"

    async def _send(
        self,
        method: str,
        url: str,
        step: str,
        *,
        timeout: float | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        deadline = self.timeout if timeout is None else timeout
        try:
            with anyio.fail_after(deadline):
                return await self._http.request(method, url, timeout=deadline, **kwargs)
        except TimeoutError as exc:
            raise RemoteAPIError(f"{step}: no complete response within {deadline:g}s") from exc
        except httpx.HTTPError as exc:
            raise RemoteAPIError(f"{step}: {exc}") from exc

    async def fetch_random_record(self, collection: str) -> Record:
        response = await self._send(
            "GET",
            f"{self._records_url(collection)}?perPage=1&sort=@random",
            "failed to fetch random record",
        )
        _raise_for_status(response, "API error")
        try:
            payload = RecordList.model_validate_json(response.content)
        except ValidationError as exc:
            raise RemoteAPIError(f"failed to decode response: {exc}", status_code=200, body=response.text) from exc

        if not payload.items:
            raise EmptyCollection(f"no records found in collection {collection}")
        record = payload.items[0]
        if not record.image:
            raise MissingImageField(f"record {record.id} has no image field")
        return record

    async def download_file(self, collection: str, record_id: str, filename: str) -> bytes:
        response = await self._send(
            "GET",
            f"{self.base_url}/api/files/{collection}/{record_id}/{filename}",
            "failed to download image",
        )
        _raise_for_status(response, "image download error")
        if not response.content:
            raise RemoteAPIError(f"empty image body for record {record_id}", status_code=200)
        return response.content

    async def fetch_random_image(self, collection: str) -> tuple[bytes, Record]:
        record = await self.fetch_random_record(collection)
        data = await self.download_file(collection, record.id, record.image)
        logger.debug("Fetched %s (%d bytes) from %s", record.image, len(data), collection)
        return data, record

    async def count_items(self, collection: str) -> int:
        response = await self._send("GET", f"{self._records_url(collection)}?perPage=1", "request failed")
        _raise_for_status(response, "API error")
        try:
            stats = CollectionStats.model_validate_json(response.content)
        except ValidationError as exc:
            raise RemoteAPIError(f"failed to decode response: {exc}", status_code=200, body=response.text) from exc
        return stats.total_items

    async def update_views(self, collection: str, record_id: str, views: int, *, timeout: float | None = None) -> int:
        """PATCH the record with ``views + 1`` and return the value sent.

        The increment is computed from the caller's snapshot, not re-read, so
        concurrent updates of the same record are last-write-wins.
        """
        new_views = views + 1
        response = await self._send(
            "PATCH",
            f"{self._records_url(collection)}/{record_id}",
            "request failed",
            timeout=timeout,
            json={"views": new_views},
        )
        _raise_for_status(response, "API error")
        return new_views
