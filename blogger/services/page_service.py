import logging
from typing import Optional

from blogger.repos.posts_repo import BlogPostMetaList
from blogger.services.html_renderer import get_post_html, get_read_more_html
from blogger.services.json_fetcher import JsonFetcher
from blogger.services.page import PageDocument

logger = logging.getLogger(__name__)


def truncate_html(content: str, max_chars: Optional[int]) -> str:
    """
    Cut `content` to `max_chars` characters, backing off to the last space
    so no word is split. None or a negative limit leaves it untouched.
    """
    if max_chars is None or max_chars < 0:
        return content
    content = content[:max_chars]
    if len(content) == max_chars:
        # Hit the limit, assume the last word was cut and drop it
        content = content[: max(content.rfind(" "), 0)]
    return content


async def render_blog_posts(
    directory: str,
    file: str,
    max_posts: int = 5,
    sort_by: str = "created",
    reverse: bool = True,
    *,
    fetcher: Optional[JsonFetcher] = None,
) -> str:
    """
    Render every post in the metadata file, in sorted order.

    `max_posts` is accepted for call compatibility; all posts are rendered.
    Posts are fetched one after another, not concurrently.
    """
    index = BlogPostMetaList(file, directory, fetcher=fetcher)
    post_list = await index.get_posts_sorted(sort_by, reverse)
    content = ""
    for post_meta in post_list:
        logger.debug(f"Rendering post {post_meta.path}")
        content += await get_post_html(post_meta)
    return content


async def render_latest_post(
    directory: str,
    file: str,
    max_chars: Optional[int] = -1,
    content_only: bool = False,
    *,
    fetcher: Optional[JsonFetcher] = None,
    read_more_page: Optional[str] = None,
) -> str:
    index = BlogPostMetaList(file, directory, fetcher=fetcher)
    post_list = await index.get_posts_sorted("created", True)
    if not post_list:
        logger.warning(f"No posts listed in {directory}{file}")
        return ""

    latest = post_list[0]
    content = await get_post_html(latest, content_only)
    if max_chars is not None and max_chars >= 0:
        content = truncate_html(content, max_chars)
        content += get_read_more_html(latest, read_more_page)
    return content


async def get_blog_posts(
    page: PageDocument,
    dom_id: str,
    directory: str,
    file: str,
    max_posts: int = 5,
    sort_by: str = "created",
    reverse: bool = True,
    *,
    fetcher: Optional[JsonFetcher] = None,
) -> str:
    """Render all posts and put them inside the page element `dom_id`."""
    content = await render_blog_posts(
        directory, file, max_posts, sort_by, reverse, fetcher=fetcher
    )
    page.set_inner_html(dom_id, content)
    return content


async def latest_blog_post(
    page: PageDocument,
    dom_id: str,
    directory: str,
    file: str,
    max_chars: Optional[int] = -1,
    content_only: bool = False,
    *,
    fetcher: Optional[JsonFetcher] = None,
) -> str:
    """
    Render the newest post into `dom_id`. With a non-negative `max_chars`
    the post is cut short and followed by a "Read More" link.
    """
    content = await render_latest_post(
        directory, file, max_chars, content_only, fetcher=fetcher
    )
    page.set_inner_html(dom_id, content)
    return content
