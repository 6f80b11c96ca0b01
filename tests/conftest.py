import asyncio
import copy


class FakeFetcher:
    """
    Minimal in-memory JsonFetcher stand-in.
    Records every requested path in `calls`, in order.
    """

    def __init__(self, docs: dict):
        self.docs = docs
        self.calls = []

    async def get_json_data(self, path: str):
        self.calls.append(path)
        if path not in self.docs:
            raise FileNotFoundError(path)
        return copy.deepcopy(self.docs[path])


class GatedFetcher(FakeFetcher):
    """
    FakeFetcher that holds every request until `release()` is called,
    so tests can pile up concurrent callers.
    """

    def __init__(self, docs: dict):
        super().__init__(docs)
        self.gate = asyncio.Event()

    def release(self):
        self.gate.set()

    async def get_json_data(self, path: str):
        self.calls.append(path)
        await self.gate.wait()
        if path not in self.docs:
            raise FileNotFoundError(path)
        return copy.deepcopy(self.docs[path])


# --- Document helpers ---


def make_post_doc(**overrides) -> dict:
    doc = {
        "title": "testTitle0",
        "created": "2022-01-20",
        "updated": "2022-01-21",
        "author": "sampleAuthor0",
        "tags": "tag0-0,tag0-1,tag0-2",
        "content": "content0",
    }
    doc.update(overrides)
    return doc


def make_meta_entry(**overrides) -> dict:
    entry = {
        "title": "testTitle0",
        "path": "post0.json",
        "created": "2022-01-20",
        "updated": "2022-01-21",
        "tags": "tag0-0,tag0-1,tag0-2",
    }
    entry.update(overrides)
    return entry


def sample_blog_docs() -> dict:
    """Three posts listed out of date order under `sample/`."""
    return {
        "sample/testdir.json": {
            "posts": [
                make_meta_entry(title="Oldest", path="post0.json", created="2022-01-20"),
                make_meta_entry(title="Newest", path="post2.json", created="2022-01-22"),
                make_meta_entry(title="Middle", path="post1.json", created="2022-01-21"),
            ]
        },
        "sample/post0.json": make_post_doc(
            title="Oldest", created="2022-01-20", updated="2022-01-20", content="zero"
        ),
        "sample/post1.json": make_post_doc(
            title="Middle", created="2022-01-21", updated="2022-01-21", content="one"
        ),
        "sample/post2.json": make_post_doc(
            title="Newest",
            created="2022-01-22",
            updated="2022-01-23",
            content="the newest post has a fairly long body\nand a second line",
        ),
    }
