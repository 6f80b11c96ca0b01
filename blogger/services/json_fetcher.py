import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional

import httpx

from blogger.settings import settings

logger = logging.getLogger(__name__)


class JsonFetcher:
    """
    Loads JSON documents by site path.

    With a base URL the path is requested over HTTP, otherwise it is read
    from disk below `root`. Errors are not caught here: HTTP status errors,
    missing files and invalid JSON all propagate to the caller.
    """

    def __init__(
        self,
        base_url: str = "",
        root: str = ".",
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url
        self.root = Path(root)
        self.client = client
        self.timeout = timeout

    async def get_json_data(self, path: str) -> Any:
        logger.info(f"Getting file at: {path}")
        if self._is_remote(path):
            data = await self._fetch_remote(path)
        else:
            data = await self._read_local(path)
        logger.debug(f"Got json data from {path}: {data}")
        return data

    def _is_remote(self, path: str) -> bool:
        return bool(self.base_url) or path.startswith(("http://", "https://"))

    def build_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def resolve_file(self, path: str) -> Path:
        # Site paths are rooted at `root`, so a leading slash does not escape it
        return self.root / path.lstrip("/")

    async def _fetch_remote(self, path: str) -> Any:
        url = self.build_url(path)
        if self.client is not None:
            response = await self.client.get(url)
        else:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                response = await client.get(url)
        response.raise_for_status()
        return response.json()

    async def _read_local(self, path: str) -> Any:
        file_path = self.resolve_file(path)
        text = await asyncio.to_thread(file_path.read_text, encoding="utf-8")
        return json.loads(text)


def get_default_fetcher(client: Optional[httpx.AsyncClient] = None) -> JsonFetcher:
    return JsonFetcher(
        base_url=settings.BLOG_BASE_URL,
        root=settings.BLOG_ROOT,
        client=client,
        timeout=settings.FETCH_TIMEOUT_SECONDS,
    )


async def get_json_data(path: str) -> Any:
    """Fetch and parse the JSON document at `path` using the configured source."""
    return await get_default_fetcher().get_json_data(path)
