import argparse
import logging
import sys
from pathlib import Path

from app.repos.posts_repo import ContentUnavailableError, FilePostsRepo
from app.services.post_service import normalize_slug, parse_post
from app.settings import settings

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def check_content(content_dir: Path, extensions) -> int:
    """Parse every listed document and report the ones that would be left out."""
    repo = FilePostsRepo(content_dir, extensions=extensions)
    failures = 0
    checked = 0
    for path in repo.document_paths():
        checked += 1
        try:
            parse_post(normalize_slug(path.name), path.read_text(encoding="utf-8"))
        except Exception as e:
            failures += 1
            logger.error(f"{path.name}: {e}")

    logger.info(f"Checked {checked} documents, {failures} malformed")
    return failures


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Validate blog post front matter")
    parser.add_argument("content_dir", nargs="?", default=settings.CONTENT_DIR)
    args = parser.parse_args()

    try:
        failures = check_content(Path(args.content_dir), settings.CONTENT_EXTENSIONS)
    except ContentUnavailableError as e:
        logger.error(str(e))
        sys.exit(2)
    sys.exit(1 if failures else 0)
