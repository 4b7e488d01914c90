"""Pagination — page arithmetic and page-number strips for paginated listings.

Invariants:
    - Pages are 1-based; any page below 1 is treated as page 1
    - page_count(0) == 0 and page_count(n) * page_size >= n
    - generate_pagination never returns more than 7 entries
"""

import math

from app.core.domain_types import ITEMS_PER_PAGE

ELLIPSIS = "..."


def normalize_page(page: int) -> int:
    return max(int(page), 1)


def page_offset(page: int, page_size: int = ITEMS_PER_PAGE) -> int:
    """Row offset of the first item on `page`."""
    return (normalize_page(page) - 1) * page_size


def page_count(total_rows: int, page_size: int = ITEMS_PER_PAGE) -> int:
    return math.ceil(max(total_rows, 0) / page_size)


def generate_pagination(current_page: int, total_pages: int) -> list[int | str]:
    """Build the page strip shown under a paginated table.

    Up to 7 pages are listed in full. Past that, ELLIPSIS marks skipped
    ranges around the first/last pages and the current page.
    """
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, ELLIPSIS, total_pages - 2, total_pages - 1, total_pages]

    return [
        1, ELLIPSIS,
        current_page - 1, current_page, current_page + 1,
        ELLIPSIS, total_pages,
    ]
