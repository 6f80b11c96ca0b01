import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from blogger.routers import posts
from blogger.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blogger API", description="Static JSON blog posts as HTML")


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.http_client = None
    if settings.fetches_over_http:
        app.state.http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.FETCH_TIMEOUT_SECONDS)
        )
        logger.info(f"Fetching posts from {settings.BLOG_BASE_URL}")
    else:
        logger.info(f"Reading posts from {settings.BLOG_ROOT}")

    try:
        yield
    finally:
        if app.state.http_client is not None:
            await app.state.http_client.aclose()
            logger.info("HTTP client closed")


app.router.lifespan_context = lifespan

app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "Blogger API is running"}
