import json

import pytest

from scripts import render_page
from tests.conftest import FakeFetcher, sample_blog_docs

PAGE = '<html><body><div id="posts">placeholder</div></body></html>'


def write_site(root):
    for path, doc in sample_blog_docs().items():
        target = root / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(doc), encoding="utf-8")
    page = root / "index.html"
    page.write_text(PAGE, encoding="utf-8")
    return page


@pytest.mark.asyncio
async def test_run_renders_all_posts_into_page(tmp_path):
    page = tmp_path / "index.html"
    page.write_text(PAGE, encoding="utf-8")
    args = render_page.build_parser().parse_args(
        [
            "--page",
            str(page),
            "--element",
            "posts",
            "--directory",
            "sample/",
            "--file",
            "testdir.json",
        ]
    )

    output = await render_page.run(args, fetcher=FakeFetcher(sample_blog_docs()))

    html = output.read_text(encoding="utf-8")
    assert output == page
    assert "placeholder" not in html
    assert html.count("<article>") == 3


@pytest.mark.asyncio
async def test_run_latest_writes_to_separate_output(tmp_path):
    page = tmp_path / "index.html"
    page.write_text(PAGE, encoding="utf-8")
    out = tmp_path / "out.html"
    args = render_page.build_parser().parse_args(
        [
            "--page",
            str(page),
            "--element",
            "posts",
            "--directory",
            "sample/",
            "--file",
            "testdir.json",
            "--latest",
            "--max-chars",
            "0",
            "--output",
            str(out),
        ]
    )

    await render_page.run(args, fetcher=FakeFetcher(sample_blog_docs()))

    assert "placeholder" in page.read_text(encoding="utf-8")
    assert 'href="blog.html?id=post2"' in out.read_text(encoding="utf-8")


def test_main_reads_files_from_blog_root(tmp_path, monkeypatch):
    from blogger.services import json_fetcher

    page = write_site(tmp_path)
    monkeypatch.setattr(json_fetcher.settings, "BLOG_ROOT", str(tmp_path))
    monkeypatch.setattr(json_fetcher.settings, "BLOG_BASE_URL", "")

    code = render_page.main(
        [
            "--page",
            str(page),
            "--element",
            "posts",
            "--directory",
            "sample/",
            "--file",
            "testdir.json",
            "--oldest-first",
        ]
    )

    html = page.read_text(encoding="utf-8")
    assert code == 0
    assert html.index("Oldest") < html.index("Newest")


def test_main_returns_error_code_on_failure(tmp_path, monkeypatch):
    from blogger.services import json_fetcher

    page = tmp_path / "index.html"
    page.write_text(PAGE, encoding="utf-8")
    monkeypatch.setattr(json_fetcher.settings, "BLOG_ROOT", str(tmp_path))
    monkeypatch.setattr(json_fetcher.settings, "BLOG_BASE_URL", "")

    code = render_page.main(["--page", str(page), "--element", "posts"])

    assert code == 1
    assert "placeholder" in page.read_text(encoding="utf-8")


def test_help_mentions_escaping_switch():
    assert "ESCAPE_HTML=false" in render_page.build_parser().format_help()
