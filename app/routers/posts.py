import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app import dependencies as deps
from app.schemas.blog import Heading, Page, PostDetail, PostSummary, TagCount
from app.security import get_settings
from app.services.posts_service import PostsService
from app.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=Page)
def list_posts(
    page: int = Query(1, description="1-based page number"),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1, le=100),
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    """Get one page of post metadata, newest first."""
    try:
        return service.list_page(page, page_size or current_settings.POSTS_PAGE_SIZE)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    unique_ids: bool = Query(False, alias="uniqueIds"),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = service.get_post(slug, unique_heading_ids=unique_ids)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/posts/{slug}/headings", response_model=List[Heading])
def get_post_headings(
    slug: str,
    unique_ids: bool = Query(False, alias="uniqueIds"),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get the table-of-contents outline of a post."""
    try:
        post = service.get_post(slug, unique_heading_ids=unique_ids)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post.headings
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error extracting headings for {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve headings")


@router.get("/tags", response_model=List[TagCount])
def list_tags(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return service.tag_counts()
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/tags/{tag:path}", response_model=List[PostSummary])
def list_posts_by_tag(
    tag: str, service: PostsService = Depends(deps.get_posts_service)
):
    try:
        return service.by_tag(tag)
    except Exception as e:
        logger.error(f"Unexpected error listing posts tagged {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/authors/{author}", response_model=List[PostSummary])
def list_posts_by_author(
    author: str, service: PostsService = Depends(deps.get_posts_service)
):
    try:
        return service.by_author(author)
    except Exception as e:
        logger.error(f"Unexpected error listing posts by {author}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
