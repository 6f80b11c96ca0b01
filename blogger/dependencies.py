from fastapi import Depends, Request

from blogger.repos.posts_repo import BlogPostMetaList
from blogger.services.json_fetcher import JsonFetcher, get_default_fetcher
from blogger.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_fetcher(request: Request) -> JsonFetcher:
    return get_default_fetcher(client=getattr(request.app.state, "http_client", None))


def get_post_index(
    fetcher=Depends(get_fetcher),
    current_settings: Settings = Depends(get_settings),
) -> BlogPostMetaList:
    return BlogPostMetaList(
        current_settings.BLOG_METADATA_FILE,
        current_settings.BLOG_DIRECTORY,
        fetcher=fetcher,
    )
