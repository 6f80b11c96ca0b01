import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from blogger.services.json_fetcher import JsonFetcher
from blogger.services.page import PageDocument
from blogger.services.page_service import get_blog_posts, latest_blog_post
from blogger.settings import settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render blog posts from JSON files into an element of an HTML page.",
        epilog=(
            "Post title, author and content are HTML-escaped unless ESCAPE_HTML=false "
            "is set in the environment or .env file."
        ),
    )
    parser.add_argument("--page", required=True, help="HTML page to render into")
    parser.add_argument("--element", required=True, help="id of the target element")
    parser.add_argument("--directory", default=settings.BLOG_DIRECTORY)
    parser.add_argument("--file", default=settings.BLOG_METADATA_FILE)
    parser.add_argument(
        "--latest", action="store_true", help="render only the newest post"
    )
    parser.add_argument("--max-chars", type=int, default=settings.LATEST_MAX_CHARS)
    parser.add_argument("--content-only", action="store_true")
    parser.add_argument("--sort-by", default="created")
    parser.add_argument("--oldest-first", action="store_true")
    parser.add_argument("--output", help="write here instead of overwriting --page")
    return parser


async def run(args: argparse.Namespace, fetcher: Optional[JsonFetcher] = None) -> Path:
    page = PageDocument.from_file(args.page)
    if args.latest:
        await latest_blog_post(
            page,
            args.element,
            args.directory,
            args.file,
            args.max_chars,
            args.content_only,
            fetcher=fetcher,
        )
    else:
        await get_blog_posts(
            page,
            args.element,
            args.directory,
            args.file,
            sort_by=args.sort_by,
            reverse=not args.oldest_first,
            fetcher=fetcher,
        )

    output = Path(args.output or args.page)
    output.write_text(page.render(), encoding="utf-8")
    return output


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        output = asyncio.run(run(args))
        logger.info(f"Rendered posts into {output}")
        return 0
    except Exception as e:
        logger.error(f"Rendering failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
