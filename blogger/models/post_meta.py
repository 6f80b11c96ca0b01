from dataclasses import dataclass, field
from typing import Any, List, Optional

from pydantic import ValidationError

from blogger.errors import PostDecodeError
from blogger.schemas.blog import BlogPost, PostMetadataEntry
from blogger.services.json_fetcher import JsonFetcher, get_default_fetcher


def join_post_path(directory: str, post_id: str) -> str:
    """`directory` + "/" + `post_id`, without doubling a trailing slash."""
    return f"{directory.rstrip('/')}/{post_id}"


@dataclass(frozen=True)
class BlogPostMeta:
    """
    Stand-in for a blog post, used for sorting/filtering without loading
    the full post body.
    """

    title: str
    id: str
    path: str
    created: Any
    updated: Any
    tags: List[str] = field(default_factory=list)
    fetcher: Optional[JsonFetcher] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_entry(
        cls,
        directory: str,
        entry: PostMetadataEntry,
        fetcher: Optional[JsonFetcher] = None,
    ) -> "BlogPostMeta":
        return cls(
            title=entry.title,
            id=entry.path,
            path=join_post_path(directory, entry.path),
            created=entry.created,
            updated=entry.updated,
            tags=list(entry.tags),
            fetcher=fetcher,
        )

    @classmethod
    def from_json(
        cls,
        directory: str,
        data: Any,
        fetcher: Optional[JsonFetcher] = None,
        source: str = "<memory>",
    ) -> "BlogPostMeta":
        """Build a handle from one raw metadata entry."""
        try:
            entry = PostMetadataEntry.model_validate(data)
        except ValidationError as e:
            raise PostDecodeError(source, e.errors()) from e
        return cls.from_entry(directory, entry, fetcher=fetcher)

    async def get_post(self) -> BlogPost:
        """Fetch and build the full post. Every call fetches again."""
        fetcher = self.fetcher or get_default_fetcher()
        data = await fetcher.get_json_data(self.path)
        return BlogPost.from_json(data, source=self.path)

    resolve = get_post

    def __str__(self) -> str:
        return (
            f"Title:\t{self.title}\n"
            f"Created:\t{self.created}\n"
            f"Updated:\t{self.updated}\n"
            f"Path:\t{self.path}\n"
            f"Tags:\t{', '.join(self.tags)}"
        )
