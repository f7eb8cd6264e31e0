"""Request Validation - paging, sort field and identifier checks for route input.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return ErrorInfo (plus the normalized value where input is transformed)
    - Never raise on bad input; the service decides how to surface ErrorInfo

Design Decisions:
    - page_index is 1-based; omitted paging values fall back to configured defaults
    - sortField matching ignores case and underscores so both fullName and full_name work
"""

from customer_api.core.domain_types import (
    OK, ErrorInfo, SortableField, SortDirection,
)

DEFAULT_SORT_FIELD = SortableField.CUSTOMER_ID

_SORT_ALIASES: dict[str, SortableField] = {
    member.value.replace("_", ""): member for member in SortableField
}
_SORT_ALIASES["id"] = SortableField.CUSTOMER_ID


def validate_paging(
    page_index: int | None,
    page_size: int | None,
    max_page_size: int,
    default_page_size: int,
) -> tuple[ErrorInfo, tuple[int, int] | None]:
    """Check paging bounds. Returns (error, (page_index, page_size))."""
    index = 1 if page_index is None else page_index
    size = min(default_page_size, max_page_size) if page_size is None else page_size

    if index < 1:
        return ErrorInfo.bad_input(
            f"pageIndex must be 1 or greater, got {index}.", "pageIndex",
        ), None
    if size < 1:
        return ErrorInfo.bad_input(
            f"pageSize must be 1 or greater, got {size}.", "pageSize",
        ), None
    if size > max_page_size:
        return ErrorInfo.bad_input(
            f"pageSize must not exceed {max_page_size}, got {size}.", "pageSize",
        ), None
    return OK, (index, size)


def validate_sort_field(
    sort_field: str | None,
) -> tuple[ErrorInfo, tuple[SortableField, SortDirection] | None]:
    """Resolve sortField to a SortableField. A leading '-' sorts descending."""
    if sort_field is None or not sort_field.strip():
        return OK, (DEFAULT_SORT_FIELD, SortDirection.ASC)

    raw = sort_field.strip()
    direction = SortDirection.ASC
    if raw.startswith("-"):
        direction = SortDirection.DESC
        raw = raw[1:]

    resolved = _SORT_ALIASES.get(raw.replace("_", "").lower())
    if resolved is None:
        allowed = ", ".join(_wire_name(m) for m in SortableField)
        return ErrorInfo.bad_input(
            f"sortField '{sort_field}' is not sortable. Allowed: {allowed}.",
            "sortField",
        ), None
    return OK, (resolved, direction)


def validate_identifier(customer_id: int) -> ErrorInfo:
    """Customer identifiers are positive integers."""
    if customer_id < 1:
        return ErrorInfo.bad_input(
            f"customerId must be a positive integer, got {customer_id}.",
            "customerId",
        )
    return OK


def validate_identifier_match(route_id: int, body_id: int | None) -> ErrorInfo:
    """Route id must be valid and equal to the id carried in the request body."""
    error = validate_identifier(route_id)
    if not error.is_ok:
        return error
    if body_id != route_id:
        return ErrorInfo.bad_input(
            f"customerId in body ({body_id}) does not match route ({route_id}).",
            "customerId",
        )
    return OK


def _wire_name(field: SortableField) -> str:
    head, *rest = field.value.split("_")
    return head + "".join(part.capitalize() for part in rest)
