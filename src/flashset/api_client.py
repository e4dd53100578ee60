import asyncio
from typing import Any

import aiohttp

from .codec.errors import CodecError, ErrorKind
from .logging import get_logger
from .set_entry import ImportPayload, SetRecord
from .messages import UNKNOWN_ERROR


class SetsApiClient:
    """Thin client for the sets backend.

    One ``aiohttp.ClientSession`` per call; nothing is retried or cached.
    Transport errors are reported exactly like HTTP error statuses.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None,
        timeout: float | None = None,
    ) -> None:
        self.logger = get_logger("flashset.api_client")
        self.base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    def _headers(self) -> dict[str, str]:
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}

    def _session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(headers=self._headers(), timeout=self._timeout)

    async def import_set(self, payload: ImportPayload) -> dict[str, Any]:
        url = f"{self.base_url}/api/sets/import"
        self.logger.info(
            "Submitting set '%s' with %d flashcards to %s",
            payload.set.name,
            len(payload.flashcards),
            url,
        )
        try:
            async with self._session() as session:
                async with session.post(url, json=payload.to_dict()) as response:
                    if response.status >= 400:
                        reason = await self._error_reason(response)
                        self.logger.warning("Import rejected with HTTP %d: %s", response.status, reason)
                        raise CodecError(ErrorKind.IMPORT_FAILED, reason)
                    return await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            self.logger.warning("Import request failed: %s", exc)
            raise CodecError(ErrorKind.IMPORT_FAILED, str(exc) or UNKNOWN_ERROR) from exc

    async def export_set(self, set_id: str, export_format: str) -> bytes:
        """Fetch an export and return the raw response body."""
        url = f"{self.base_url}/api/sets/{set_id}/export"
        self.logger.info("Requesting %s export of set %s", export_format, set_id)
        try:
            async with self._session() as session:
                async with session.get(url, params={"format": export_format}) as response:
                    if response.status >= 400:
                        self.logger.warning("Export of set %s failed with HTTP %d", set_id, response.status)
                        raise CodecError(ErrorKind.EXPORT_FAILED, f"HTTP {response.status}")
                    return await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            self.logger.warning("Export request failed: %s", exc)
            raise CodecError(ErrorKind.EXPORT_FAILED, str(exc)) from exc

    async def list_sets(self) -> list[SetRecord]:
        url = f"{self.base_url}/api/sets"
        async with self._session() as session:
            async with session.get(url) as response:
                response.raise_for_status()
                data = await response.json(content_type=None)
        sets = [SetRecord.from_dict(item) for item in data or []]
        self.logger.info("Fetched %d sets", len(sets))
        return sets

    @staticmethod
    async def _error_reason(response: aiohttp.ClientResponse) -> str:
        try:
            body = await response.json(content_type=None)
        except ValueError:
            return UNKNOWN_ERROR
        if not isinstance(body, dict):
            return UNKNOWN_ERROR
        return body.get("message") or body.get("error") or UNKNOWN_ERROR
