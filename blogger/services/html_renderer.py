import datetime
import html
import logging
from typing import Optional
from urllib.parse import quote
from zoneinfo import ZoneInfo

from blogger.models.post_meta import BlogPostMeta
from blogger.schemas.blog import BlogPost
from blogger.settings import settings

logger = logging.getLogger(__name__)

# Fixed so output never depends on the process locale
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def display_timezone() -> datetime.tzinfo:
    if settings.DISPLAY_TIMEZONE.upper() == "UTC":
        return datetime.timezone.utc
    return ZoneInfo(settings.DISPLAY_TIMEZONE)


def format_date(
    value: datetime.datetime, tz: Optional[datetime.tzinfo] = None
) -> str:
    """Format as "Month Day, Year", e.g. "January 20, 2022"."""
    local = value.astimezone(tz or display_timezone())
    return f"{MONTH_NAMES[local.month - 1]} {local.day}, {local.year}"


def _text(value: str, escape: Optional[bool]) -> str:
    if escape is None:
        escape = settings.ESCAPE_HTML
    return html.escape(value, quote=False) if escape else value


def get_title_html(post: BlogPost, escape: Optional[bool] = None) -> str:
    return f"<h3>{_text(post.title, escape)}</h3>"


def get_timestamp_html(
    post: BlogPost,
    escape: Optional[bool] = None,
    tz: Optional[datetime.tzinfo] = None,
) -> str:
    """
    Author and creation date, plus an update line when the post was changed.
    The update line is only added when the two instants differ.
    """
    created = (
        f'<p class="timestamp">Written by {_text(post.author, escape)} on '
        f"{format_date(post.created, tz)}</p>"
    )
    updated = ""
    if post.created != post.updated:
        updated = f'<p class="timestamp">Updated on {format_date(post.updated, tz)}</p>'
    return created + updated


def get_body_html(post: BlogPost, escape: Optional[bool] = None) -> str:
    """Every newline in the content becomes a paragraph boundary."""
    paragraphs = "<p>" + _text(post.content, escape).replace("\n", "</p><p>") + "</p>"
    return f"<p>{paragraphs}</p>"


def render_post_html(
    post: BlogPost, wrap: bool = True, escape: Optional[bool] = None
) -> str:
    body = (
        get_title_html(post, escape)
        + get_timestamp_html(post, escape)
        + get_body_html(post, escape)
    )
    if wrap:
        return f"<article>{body}</article>"
    return body


async def get_post_html(post_meta: BlogPostMeta, content_only: bool = False) -> str:
    """Fetch the post behind `post_meta` and render it."""
    post = await post_meta.get_post()
    rendered = render_post_html(post, wrap=not content_only)
    logger.debug(f"Rendered {post_meta.path}: {rendered}")
    return rendered


def get_read_more_html(post_meta: BlogPostMeta, page: Optional[str] = None) -> str:
    post_id = quote(post_meta.id.removesuffix(".json"))
    href = f"{page or settings.READ_MORE_PAGE}?id={post_id}"
    return f'<a href="{href}"><i>Read More</i></a>'
