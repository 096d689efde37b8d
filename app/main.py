import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from app.routers import posts, search, seo
from app.security import get_api_key
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Blog Content API", description="Posts, tags and search for the blog"
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    content_path = settings.content_path
    if content_path.is_dir():
        logger.info(f"Serving posts from {content_path.resolve()}")
    else:
        logger.warning(f"Content directory {content_path} does not exist")

    yield
    logger.info("Blog content API shut down")


app.router.lifespan_context = lifespan

app.include_router(seo.router)
# Public, the browser search modal calls it
app.include_router(search.router)
app.include_router(posts.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "Blog content API is running"}
