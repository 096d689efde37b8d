import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app import dependencies as deps
from app.schemas.blog import PostSummary
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts/search", response_model=List[PostSummary])
@router.get("/api/posts", response_model=List[PostSummary], include_in_schema=False)
def search_posts(
    keywords: Optional[str] = Query(None, description="Free-text search"),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Search post titles and descriptions. An empty query returns no posts."""
    try:
        return service.by_search(keywords)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error searching posts for {keywords!r}: {e}")
        raise HTTPException(status_code=500, detail="Failed to search posts")
