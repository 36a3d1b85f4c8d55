"""Page window and metadata computation for filtered listings."""
from typing import List, Sequence, Tuple, TypeVar

from cityinfo.domain.value_objects.pagination import PaginationMetadata

T = TypeVar("T")


def page_window(page_number: int, page_size: int) -> Tuple[int, int]:
    """Return (skip, take) for a 1-based page number."""
    if page_number < 1:
        raise ValueError(f"Page number must be at least 1, got {page_number}")
    if page_size < 1:
        raise ValueError(f"Page size must be at least 1, got {page_size}")
    return page_size * (page_number - 1), page_size


def build_metadata(total_item_count: int, page_number: int, page_size: int) -> PaginationMetadata:
    """Metadata for a page of a set holding ``total_item_count`` items."""
    return PaginationMetadata(
        total_item_count=total_item_count,
        page_size=page_size,
        current_page=page_number,
    )


def paginate(items: Sequence[T], page_number: int, page_size: int) -> Tuple[List[T], PaginationMetadata]:
    """Slice an already filtered and ordered sequence.

    Pages past the end give an empty list; the metadata still carries the
    full count.
    """
    skip, take = page_window(page_number, page_size)
    metadata = build_metadata(len(items), page_number, page_size)
    return list(items[skip:skip + take]), metadata
