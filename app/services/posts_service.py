import logging
from collections import Counter
from typing import List, Optional, Set

from app.schemas.blog import Page, PostDetail, PostSummary, TagCount
from app.services.headings import extract_headings
from app.services.pagination import paginate_items

logger = logging.getLogger(__name__)


class PostsService:
    """Read-only queries over the repository listing. Recency order is preserved."""

    def __init__(self, repo):
        self.repo = repo

    def list_posts(self) -> List[PostSummary]:
        return [post.summary() for post in self.repo.list_all()]

    def list_page(self, page: int, page_size: int) -> Page:
        posts = self.list_posts()
        items, bounds = paginate_items(posts, page, page_size)
        if not items and posts:
            logger.info(f"Page {page} is out of range (1-{bounds.total_pages})")
        return Page(
            items=list(items),
            pageNumber=bounds.page,
            pageSize=page_size,
            totalPages=bounds.total_pages,
            totalItems=len(posts),
        )

    def get_post(
        self, slug: str, unique_heading_ids: bool = False
    ) -> Optional[PostDetail]:
        post = self.repo.get_by_slug(slug)
        if not post:
            return None
        headings = extract_headings(post.content, unique=unique_heading_ids)
        return PostDetail(**post.model_dump(), headings=headings)

    def by_tag(self, tag: str) -> List[PostSummary]:
        return [post.summary() for post in self.repo.list_all() if tag in post.tags]

    def by_author(self, author: str) -> List[PostSummary]:
        return [
            post.summary() for post in self.repo.list_all() if post.author == author
        ]

    def by_search(self, query: Optional[str]) -> List[PostSummary]:
        """
        Case-insensitive substring match on title or description.
        A missing or empty query matches nothing rather than everything. The
        query is not trimmed.
        """
        if not query:
            return []

        needle = query.lower()
        return [
            post.summary()
            for post in self.repo.list_all()
            if needle in post.title.lower() or needle in post.description.lower()
        ]

    def distinct_tags(self) -> Set[str]:
        return {tag for post in self.repo.list_all() for tag in post.tags}

    def tag_counts(self) -> List[TagCount]:
        counts = Counter(
            tag for post in self.repo.list_all() for tag in set(post.tags)
        )
        return [TagCount(tag=tag, count=counts[tag]) for tag in sorted(counts)]
