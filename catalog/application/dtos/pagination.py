"""Pagination envelope shared by every paginated read-model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Paginated:
    """Page metadata. Concrete pages add a typed ``data`` list."""

    count: int
    total_pages: int
    current_page: int
    has_next_page: bool


def page_meta(count: int, page: int, size: int) -> dict[str, int | bool]:
    """Return Paginated field values for a result set of ``count`` rows."""
    total_pages = (count + size - 1) // size if size > 0 else 0
    return {
        "count": count,
        "total_pages": total_pages,
        "current_page": page,
        "has_next_page": page < total_pages,
    }
