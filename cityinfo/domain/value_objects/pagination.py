"""Pagination metadata value object - immutable and validated."""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PaginationMetadata:
    """Describes one page of a filtered listing.

    ``total_item_count`` is the size of the filtered set before the page
    window is applied.
    """
    total_item_count: int
    page_size: int
    current_page: int

    def __post_init__(self):
        """Validate metadata."""
        if self.total_item_count < 0:
            raise ValueError(f"Total item count cannot be negative, got {self.total_item_count}")
        if self.page_size < 1:
            raise ValueError(f"Page size must be at least 1, got {self.page_size}")
        if self.current_page < 1:
            raise ValueError(f"Current page must be at least 1, got {self.current_page}")

    @property
    def total_page_count(self) -> int:
        return math.ceil(self.total_item_count / self.page_size)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "total_item_count": self.total_item_count,
            "total_page_count": self.total_page_count,
            "page_size": self.page_size,
            "current_page": self.current_page,
        }
