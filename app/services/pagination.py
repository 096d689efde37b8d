import math
from typing import NamedTuple, Sequence, Tuple, TypeVar

T = TypeVar("T")


class PageBounds(NamedTuple):
    start: int
    end: int
    page: int
    total_pages: int

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end


def paginate(count: int, page: int, page_size: int) -> PageBounds:
    """
    Compute the half-open index range ``[start, end)`` for a 1-based page.

    Pages outside ``[1, total_pages]`` are not clamped; they come back empty
    with ``start == end``.
    """
    if page_size < 1:
        raise ValueError("page_size must be at least 1")

    count = max(count, 0)
    total_pages = math.ceil(count / page_size)

    if page < 1 or page > total_pages:
        return PageBounds(start=0, end=0, page=page, total_pages=total_pages)

    start = (page - 1) * page_size
    end = min(count, page * page_size)
    return PageBounds(start=start, end=end, page=page, total_pages=total_pages)


def paginate_items(
    items: Sequence[T], page: int, page_size: int
) -> Tuple[Sequence[T], PageBounds]:
    bounds = paginate(len(items), page, page_size)
    return items[bounds.start : bounds.end], bounds
