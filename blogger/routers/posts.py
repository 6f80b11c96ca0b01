import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from blogger import dependencies as deps
from blogger.repos.posts_repo import BlogPostMetaList
from blogger.schemas.blog import PostSummary
from blogger.services.page_service import render_blog_posts, render_latest_post
from blogger.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
async def list_posts(
    sort_by: str = "created",
    reverse: bool = True,
    index: BlogPostMetaList = Depends(deps.get_post_index),
):
    """Get all post metadata, sorted."""
    try:
        posts = await index.get_posts_sorted(sort_by, reverse)
        return [PostSummary.model_validate(post) for post in posts]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/html", response_class=HTMLResponse)
async def list_posts_html(
    sort_by: str = "created",
    reverse: bool = True,
    fetcher=Depends(deps.get_fetcher),
    settings: Settings = Depends(deps.get_settings),
):
    """
    Every post rendered as HTML articles.
    Title, author and content are escaped unless ESCAPE_HTML is off.
    """
    try:
        return await render_blog_posts(
            settings.BLOG_DIRECTORY,
            settings.BLOG_METADATA_FILE,
            sort_by=sort_by,
            reverse=reverse,
            fetcher=fetcher,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to render posts")


@router.get("/posts/latest", response_class=HTMLResponse)
async def latest_post_html(
    max_chars: Optional[int] = None,
    content_only: bool = False,
    fetcher=Depends(deps.get_fetcher),
    settings: Settings = Depends(deps.get_settings),
):
    """The newest post as HTML, optionally cut short with a "Read More" link."""
    if max_chars is None:
        max_chars = settings.LATEST_MAX_CHARS
    try:
        return await render_latest_post(
            settings.BLOG_DIRECTORY,
            settings.BLOG_METADATA_FILE,
            max_chars,
            content_only,
            fetcher=fetcher,
            read_more_page=settings.READ_MORE_PAGE,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering latest post: {e}")
        raise HTTPException(status_code=500, detail="Failed to render latest post")
