import logging
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from app.schemas.blog import Post
from app.services.post_service import normalize_slug, parse_post

logger = logging.getLogger(__name__)

# content dir -> (signature, posts)
_cache: Dict[str, Tuple[tuple, List[Post]]] = {}
_cache_lock = threading.Lock()


class ContentUnavailableError(RuntimeError):
    """The content directory itself could not be read."""


class FilePostsRepo:
    def __init__(
        self,
        content_dir,
        extensions: Iterable[str] = (".mdx", ".md"),
        use_cache: bool = False,
    ):
        self.content_dir = Path(content_dir)
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.use_cache = use_cache

    def list_all(self) -> List[Post]:
        """Every readable post, newest first. Malformed documents are skipped."""
        paths = self.document_paths()

        if not self.use_cache:
            return self._load(paths)

        key = str(self.content_dir.resolve())
        signature = self._signature(paths)
        with _cache_lock:
            cached = _cache.get(key)
        if cached and cached[0] == signature:
            return list(cached[1])

        posts = self._load(paths)
        with _cache_lock:
            _cache[key] = (signature, posts)
        return list(posts)

    def get_by_slug(self, slug: str) -> Optional[Post]:
        if not self._is_safe_slug(slug):
            return None

        for ext in self.extensions:
            path = self.content_dir / f"{slug}{ext}"
            if not path.is_file():
                continue
            try:
                return parse_post(slug, path.read_text(encoding="utf-8"))
            except Exception as e:
                logger.warning(f"Failed to parse post {slug}: {e}")
                return None
        return None

    def clear_cache(self) -> None:
        with _cache_lock:
            _cache.pop(str(self.content_dir.resolve()), None)

    def document_paths(self) -> List[Path]:
        """
        Documents that make up the listing, one per slug, in filename order.
        Dotfiles and other extensions are ignored.
        """
        try:
            entries = sorted(self.content_dir.iterdir())
        except OSError as e:
            raise ContentUnavailableError(
                f"Cannot read content directory {self.content_dir}: {e}"
            ) from e

        by_slug: Dict[str, Path] = {}
        for path in entries:
            ext = path.suffix.lower()
            if path.name.startswith(".") or ext not in self.extensions:
                continue
            if not path.is_file():
                continue
            slug = normalize_slug(path.name)
            current = by_slug.get(slug)
            if current is None:
                by_slug[slug] = path
                continue
            # Earlier entries in self.extensions win
            ignored = path
            if self.extensions.index(ext) < self.extensions.index(
                current.suffix.lower()
            ):
                ignored, by_slug[slug] = current, path
            logger.warning(f"Duplicate slug {slug}: ignoring {ignored.name}")
        return list(by_slug.values())

    def _load(self, paths: List[Path]) -> List[Post]:
        posts = []
        for path in paths:
            slug = normalize_slug(path.name)
            try:
                posts.append(parse_post(slug, path.read_text(encoding="utf-8")))
            except Exception as e:
                logger.warning(f"Failed to parse post {slug}: {e}")

        posts.sort(key=lambda p: p.published, reverse=True)
        return posts

    @staticmethod
    def _signature(paths: List[Path]) -> tuple:
        entries = []
        for path in paths:
            try:
                stat = path.stat()
            except OSError:
                continue
            entries.append((path.name, stat.st_size, stat.st_mtime_ns))
        return tuple(entries)

    @staticmethod
    def _is_safe_slug(slug: str) -> bool:
        if not slug or slug.startswith("."):
            return False
        return "/" not in slug and "\\" not in slug
