import asyncio
import logging
from typing import Iterable, List, Optional

from blogger.models.post_meta import BlogPostMeta
from blogger.schemas.blog import MetadataDocument, PostMetadataEntry
from blogger.services.json_fetcher import JsonFetcher, get_default_fetcher
from blogger.services.sorting import sort_posts

logger = logging.getLogger(__name__)


class BlogPostMetaList:
    """
    Lazily loaded list of post metadata read from one metadata file.

    The file is fetched on first access. Concurrent first accesses share a
    single in-flight fetch; a failed fetch is retried on the next access.
    """

    def __init__(
        self,
        file: str,
        directory: str = "",
        fetcher: Optional[JsonFetcher] = None,
    ):
        logger.debug(f"Getting metadata from {directory}{file}")
        self.directory = directory
        self.path = directory + file
        self.fetcher = fetcher or get_default_fetcher()
        self.initialized = False
        self.posts: List[BlogPostMeta] = []
        self._init_task: Optional[asyncio.Task] = None

    def convert_to_metadata_objects(
        self, entries: Iterable[PostMetadataEntry]
    ) -> List[BlogPostMeta]:
        return [
            BlogPostMeta.from_entry(self.directory, entry, fetcher=self.fetcher)
            for entry in entries
        ]

    async def init(self) -> List[BlogPostMeta]:
        if self._init_task is None:
            self._init_task = asyncio.ensure_future(self._load())
            self._init_task.add_done_callback(self._forget_failed_init)
        # shield: one waiter being cancelled must not cancel the shared fetch
        return await asyncio.shield(self._init_task)

    def _forget_failed_init(self, task: asyncio.Future) -> None:
        # A failed load is dropped even when no waiter is left to see it
        if self._init_task is task and (
            task.cancelled() or task.exception() is not None
        ):
            self._init_task = None

    async def _load(self) -> List[BlogPostMeta]:
        data = await self.fetcher.get_json_data(self.path)
        document = MetadataDocument.from_json(data, source=self.path)
        self.posts = self.convert_to_metadata_objects(document.posts)
        self.initialized = True
        logger.debug(f"Loaded {len(self.posts)} post entries from {self.path}")
        return self.posts

    async def get_posts(self) -> List[BlogPostMeta]:
        if not self.initialized:
            await self.init()
        return list(self.posts)

    async def get_posts_sorted(
        self, attr: str = "created", reverse: bool = False
    ) -> List[BlogPostMeta]:
        return sort_posts(await self.get_posts(), attr, reverse)

    async def get_posts_most_recent(self) -> List[BlogPostMeta]:
        """Newest first."""
        return await self.get_posts_sorted("created", True)
