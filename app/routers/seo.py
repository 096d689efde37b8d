import datetime
import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse, Response

from app import dependencies as deps
from app.security import get_settings
from app.services.sitemap import build_sitemap_entries, render_robots, render_sitemap
from app.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sitemap.xml")
def sitemap(
    repo=Depends(deps.get_posts_repo),
    current_settings: Settings = Depends(get_settings),
):
    """
    Sitemap for crawlers, one entry per post plus the static pages
    """
    try:
        launch_date = datetime.date.fromisoformat(current_settings.SITE_LAUNCH_DATE)
        entries = build_sitemap_entries(
            repo.list_all(), current_settings.SITE_URL, launch_date
        )
    except Exception as e:
        logger.error(f"Failed to build sitemap: {e}")
        raise HTTPException(status_code=500, detail="Failed to build sitemap")

    return Response(content=render_sitemap(entries), media_type="application/xml")


@router.get("/robots.txt", response_class=PlainTextResponse)
def robots(current_settings: Settings = Depends(get_settings)):
    return render_robots(current_settings.SITE_URL)
