import textwrap

import pytest

from app.schemas.blog import Post
from app.services.post_service import parse_published


def make_post(slug: str, date: str = "2024-01-01", **overrides) -> Post:
    """Build a Post without touching the filesystem."""
    data = {
        "slug": slug,
        "title": slug.replace("-", " ").title(),
        "date": date,
        "description": f"About {slug}",
        "author": "Steve Bang",
        "readingTime": "3 min",
        "image": None,
        "tags": [],
        "content": f"# {slug}\n\nBody of {slug}.",
        "published": parse_published(date),
    }
    data.update(overrides)
    return Post(**data)


def write_doc(directory, filename: str, text: str):
    path = directory / filename
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


def write_post(
    directory,
    slug: str,
    date: str = "2024-01-01",
    tags=None,
    ext: str = ".mdx",
    body: str = "Some body text.",
    **fields,
):
    meta = {
        "title": slug.replace("-", " ").title(),
        "date": date,
        "description": f"About {slug}",
        "author": "Steve Bang",
        "readingTime": "5 min",
    }
    meta.update(fields)
    lines = ["---"]
    for key, value in meta.items():
        if value is not None:
            lines.append(f"{key}: {value}")
    if tags is not None:
        lines.append(f"tags: [{', '.join(tags)}]")
    lines.append("---")
    lines.append("")
    lines.append(body)
    path = directory / f"{slug}{ext}"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path):
    directory = tmp_path / "blog"
    directory.mkdir()
    return directory


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, posts):
        self.posts = list(posts)
        self.list_calls = 0

    def list_all(self):
        self.list_calls += 1
        return sorted(self.posts, key=lambda p: p.published, reverse=True)

    def get_by_slug(self, slug):
        for post in self.posts:
            if post.slug == slug:
                return post
        return None


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_page_return=None,
        get_post_return=None,
        search_return=None,
        tag_counts_return=None,
        by_tag_return=None,
        by_author_return=None,
    ):
        self._list_page_return = list_page_return
        self._get_post_return = get_post_return
        self._search_return = search_return or []
        self._tag_counts_return = tag_counts_return or []
        self._by_tag_return = by_tag_return or []
        self._by_author_return = by_author_return or []
        self.calls = []

    def list_page(self, page, page_size):
        self.calls.append(("list_page", page, page_size))
        return self._list_page_return

    def get_post(self, slug: str, unique_heading_ids: bool = False):
        self.calls.append(("get_post", slug, unique_heading_ids))
        return self._get_post_return

    def by_search(self, query):
        self.calls.append(("by_search", query))
        return self._search_return

    def tag_counts(self):
        return self._tag_counts_return

    def by_tag(self, tag):
        self.calls.append(("by_tag", tag))
        return self._by_tag_return

    def by_author(self, author):
        self.calls.append(("by_author", author))
        return self._by_author_return
