import datetime
import logging
import math
import os
from typing import Any, List

from app.schemas.blog import Post
from app.services.front_matter import parse_front_matter

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "date", "description", "author")
WORDS_PER_MINUTE = 200


def parse_post(slug: str, text: str) -> Post:
    """
    Build a Post from a raw document.

    Raises ValueError (or a subclass) when the document is malformed:
    broken front matter, a missing required field or an unparseable date.
    """
    metadata, body = parse_front_matter(text)

    missing = [field for field in REQUIRED_FIELDS if metadata.get(field) in (None, "")]
    if missing:
        raise ValueError(f"Missing front matter fields: {', '.join(missing)}")

    date = convert_date_to_string(metadata["date"])
    published = parse_published(date)

    reading_time = metadata.get("readingTime")
    if reading_time in (None, ""):
        reading_time = calculate_reading_time(body)
        logger.debug(f"No readingTime for {slug}, derived {reading_time}")

    return Post(
        slug=slug,
        title=as_text(metadata["title"]),
        date=date,
        description=as_text(metadata["description"]),
        author=as_text(metadata["author"]),
        readingTime=as_text(reading_time),
        image=as_text(metadata.get("image")) if metadata.get("image") else None,
        tags=normalize_tags(metadata.get("tags")),
        content=body,
        published=published,
    )


def calculate_reading_time(body: str) -> str:
    """Reading time of a post body as `"N min"`, at least one minute."""
    minutes = math.ceil(len(body.split()) / WORDS_PER_MINUTE) or 1
    return f"{minutes} min"


def as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def normalize_tags(value) -> List[str]:
    """
    Normalize tag metadata into a list of strings. Order and duplicates are kept.
    """
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def convert_date_to_string(value) -> str:
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return str(value).strip()


def parse_published(value: str) -> datetime.datetime:
    """Parse an ISO date string into a naive UTC datetime usable as a sort key."""
    try:
        parsed = datetime.datetime.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"Unparseable date {value!r}") from e
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return parsed


def normalize_slug(filename: str) -> str:
    """Remove extension so the file stem becomes the slug."""
    base, _ = os.path.splitext(filename)
    return base
