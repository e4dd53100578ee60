import asyncio
from typing import Any, Awaitable, Callable

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer


class FakeSetsBackend:
    """In-process stand-in for the sets backend.

    Records every request it sees; responses are configured through plain
    attributes before ``run`` is called.
    """

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self.import_status = 201
        self.import_body: Any = None
        self.export_status = 200
        self.export_bodies: dict[str, str | bytes] = {}
        self.sets: list[dict[str, Any]] = []
        self.hold_import = False
        self.import_started: asyncio.Event | None = None
        self.release_import: asyncio.Event | None = None

    def _record(self, request: web.Request, body: Any = None) -> None:
        self.requests.append({
            "method": request.method,
            "path": request.path,
            "query": dict(request.query),
            "authorization": request.headers.get("Authorization"),
            "body": body,
        })

    async def _import(self, request: web.Request) -> web.Response:
        body = await request.json()
        self._record(request, body)
        if self.hold_import:
            self.import_started.set()
            await self.release_import.wait()
        if self.import_body is None:
            response = {
                "set": {"id": "srv-1", "owner": "alice", **body["set"]},
                "flashcards": [dict(card, id=f"card-{i}") for i, card in enumerate(body["flashcards"])],
            }
            return web.json_response(response, status=self.import_status)
        if isinstance(self.import_body, str):
            return web.Response(text=self.import_body, status=self.import_status)
        return web.json_response(self.import_body, status=self.import_status)

    async def _export(self, request: web.Request) -> web.Response:
        self._record(request)
        fmt = request.query.get("format", "")
        content_type = "text/csv" if fmt == "csv" else "application/json"
        body = self.export_bodies.get(fmt, "")
        if isinstance(body, bytes):
            return web.Response(body=body, status=self.export_status, content_type=content_type)
        return web.Response(text=body, status=self.export_status, content_type=content_type)

    async def _list_sets(self, request: web.Request) -> web.Response:
        self._record(request)
        return web.json_response(self.sets)

    def make_app(self) -> web.Application:
        self.import_started = asyncio.Event()
        self.release_import = asyncio.Event()
        app = web.Application()
        app.router.add_post("/api/sets/import", self._import)
        app.router.add_get("/api/sets/{set_id}/export", self._export)
        app.router.add_get("/api/sets", self._list_sets)
        return app

    def run(self, scenario: Callable[[str], Awaitable[Any]]) -> Any:
        """Serve the backend for the duration of ``scenario(base_url)``."""

        async def main() -> Any:
            async with TestServer(self.make_app()) as server:
                base_url = str(server.make_url("")).rstrip("/")
                return await scenario(base_url)

        return asyncio.run(main())


@pytest.fixture
def backend() -> FakeSetsBackend:
    return FakeSetsBackend()


@pytest.fixture
def unreachable_url() -> str:
    """A base URL nothing listens on."""
    return "http://127.0.0.1:9"
