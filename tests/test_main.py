import httpx
from fastapi.testclient import TestClient

import blogger.main as main_module
from blogger import dependencies as deps
from blogger.main import app
from blogger.settings import Settings
from tests.conftest import FakeFetcher, sample_blog_docs


def test_root_endpoint_runs_lifespan_without_http_client(monkeypatch):
    monkeypatch.setattr(main_module, "settings", Settings(BLOG_BASE_URL=""))

    with TestClient(app) as client:
        res = client.get("/")
        assert res.status_code == 200
        assert res.json() == {"message": "Blogger API is running"}
        assert app.state.http_client is None


def test_lifespan_opens_and_closes_http_client(monkeypatch):
    monkeypatch.setattr(
        main_module, "settings", Settings(BLOG_BASE_URL="https://example.com")
    )

    with TestClient(app):
        http_client = app.state.http_client
        assert isinstance(http_client, httpx.AsyncClient)
        assert http_client.is_closed is False

    assert http_client.is_closed is True


def test_posts_routes_are_mounted():
    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[deps.get_fetcher] = lambda: FakeFetcher(sample_blog_docs())
    app.dependency_overrides[deps.get_settings] = lambda: Settings(
        BLOG_DIRECTORY="sample/", BLOG_METADATA_FILE="testdir.json"
    )
    try:
        with TestClient(app) as client:
            res = client.get("/posts")
            assert res.status_code == 200
            assert len(res.json()) == 3
    finally:
        app.dependency_overrides = original_overrides
