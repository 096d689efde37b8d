import logging
import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Security
from fastapi.security.api_key import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from app.settings import Settings, settings

logger = logging.getLogger(__name__)

BLOG_KEY_HEADER = "X-Blog-Key"
blog_key_header = APIKeyHeader(name=BLOG_KEY_HEADER, auto_error=False)


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_api_key(
    api_key_header: Optional[str] = Security(blog_key_header),
    current_settings: Settings = Depends(get_settings),
) -> str:
    """
    Guard for the content routes. An unset BLOG_API_KEY locks them
    rather than opening them to an empty header.
    """
    expected = current_settings.BLOG_API_KEY
    if not expected:
        logger.warning("BLOG_API_KEY is not set, rejecting content request")
    elif api_key_header and secrets.compare_digest(
        api_key_header.encode(), expected.encode()
    ):
        return api_key_header
    raise HTTPException(
        status_code=HTTP_403_FORBIDDEN,
        detail="Could not validate API key",
    )
