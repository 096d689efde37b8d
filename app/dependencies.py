from fastapi import Depends

from app.repos.posts_repo import FilePostsRepo
from app.security import get_settings
from app.services.posts_service import PostsService


def get_posts_repo(current_settings=Depends(get_settings)):
    return FilePostsRepo(
        current_settings.content_path,
        extensions=current_settings.CONTENT_EXTENSIONS,
        use_cache=current_settings.POSTS_CACHE_ENABLED,
    )


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)
