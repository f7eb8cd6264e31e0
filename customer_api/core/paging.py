"""In-Memory Paging - sort, slice and page metadata over a fully loaded collection.

Invariants:
    - total_pages = ceil(total_records / page_size); 0 when the collection is empty
    - page_size is always >= 1 here (validate_paging runs first), so no division by zero
    - A page_index past the last page yields an empty items list, never an error
    - Sorting is stable; ties keep repository order
"""

from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

from customer_api.core.customer_record import CustomerRecord
from customer_api.core.domain_types import SortableField, SortDirection

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    page_index: int
    page_size: int
    total_records: int
    total_pages: int
    items: list[T] = field(default_factory=list)


def count_pages(total_records: int, page_size: int) -> int:
    if total_records <= 0:
        return 0
    return (total_records + page_size - 1) // page_size


def paginate(items: Sequence[T], page_index: int, page_size: int) -> Page[T]:
    """Slice a 1-based page out of items."""
    total = len(items)
    start = (page_index - 1) * page_size
    return Page(
        page_index=page_index,
        page_size=page_size,
        total_records=total,
        total_pages=count_pages(total, page_size),
        items=list(items[start:start + page_size]),
    )


def sort_customers(
    customers: Sequence[CustomerRecord],
    sort_field: SortableField,
    direction: SortDirection = SortDirection.ASC,
) -> list[CustomerRecord]:
    """Order customers by a sortable field. Names compare case-insensitively."""
    def key(customer: CustomerRecord):
        value = getattr(customer, sort_field.value)
        if isinstance(value, str):
            return value.casefold()
        return value

    return sorted(
        customers, key=key, reverse=direction == SortDirection.DESC,
    )
