import json
from pathlib import Path
from typing import Any

import anyio
import httpx

POCKETBASE_URL = "http://pocketbase.test"


async def _drip(body: bytes, delay: float):
    for byte in body:
        await anyio.sleep(delay)
        yield bytes([byte])


def slow_transport(body: bytes, delay: float) -> httpx.MockTransport:
    """Answer 200 at once, then send the body one byte per ``delay`` seconds."""

    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"Content-Length": str(len(body))}, content=_drip(body, delay))

    return httpx.MockTransport(handler)


def create_image_files(directory: Path, names: list[str], content: bytes = b"\x89PNG fake") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).write_bytes(content)
    return directory


def record_page(*records: dict[str, Any], total: int | None = None) -> dict[str, Any]:
    return {
        "page": 1,
        "perPage": 1,
        "totalItems": len(records) if total is None else total,
        "totalPages": 1,
        "items": list(records),
    }


class FakePocketBase:
    """In-memory stand-in for the PocketBase endpoints the server talks to."""

    def __init__(self) -> None:
        self.random_response: tuple[int, Any] = (200, record_page())
        self.count_response: tuple[int, Any] = (200, record_page())
        self.files: dict[str, tuple[int, Any]] = {}
        self.patch_response: tuple[int, Any] = (200, {})
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def requests_for(self, method: str) -> list[httpx.Request]:
        return [request for request in self.requests if request.method == method]

    def patch_bodies(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests_for("PATCH")]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error

        path = request.url.path
        if request.method == "PATCH" and path.startswith("/api/collections/"):
            return self._respond(self.patch_response)
        if request.method == "GET" and path.startswith("/api/files/"):
            return self._respond(self.files.get(path, (404, {"message": "The requested resource wasn't found."})))
        if request.method == "GET" and path.endswith("/records"):
            if request.url.params.get("sort") == "@random":
                return self._respond(self.random_response)
            return self._respond(self.count_response)
        return self._respond((404, {"message": "unknown route"}))

    @staticmethod
    def _respond(canned: tuple[int, Any]) -> httpx.Response:
        status, body = canned
        if isinstance(body, bytes):
            return httpx.Response(status, content=body)
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)
