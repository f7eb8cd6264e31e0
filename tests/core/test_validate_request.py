"""Request Validation - tests for paging, sort field and identifier checks.

Tests cover:
    - validate_paging applies defaults and enforces 1 <= pageSize <= max
    - validate_sort_field resolves camelCase/snake_case names and '-' for descending
    - validate_identifier rejects non-positive ids
    - validate_identifier_match requires route id == body id
"""

import pytest

from customer_api.core.domain_types import ErrorType, SortableField, SortDirection
from customer_api.core.validate_request import (
    validate_identifier,
    validate_identifier_match,
    validate_paging,
    validate_sort_field,
)


# ─── validate_paging ─────────────────────────────────────────────

def test_paging_defaults_when_omitted():
    error, paging = validate_paging(None, None, max_page_size=50, default_page_size=10)
    assert error.is_ok
    assert paging == (1, 10)


def test_paging_default_size_capped_by_maximum():
    error, paging = validate_paging(None, None, max_page_size=5, default_page_size=10)
    assert error.is_ok
    assert paging == (1, 5)


def test_paging_accepts_size_equal_to_maximum():
    error, paging = validate_paging(3, 50, max_page_size=50, default_page_size=10)
    assert error.is_ok
    assert paging == (3, 50)


@pytest.mark.parametrize("page_size", [51, 100, 10_000])
def test_paging_rejects_size_above_maximum(page_size):
    error, paging = validate_paging(1, page_size, max_page_size=50, default_page_size=10)
    assert error.error_type == ErrorType.BAD_INPUT
    assert error.field == "pageSize"
    assert paging is None


@pytest.mark.parametrize("page_size", [0, -1])
def test_paging_rejects_non_positive_size(page_size):
    error, _ = validate_paging(1, page_size, max_page_size=50, default_page_size=10)
    assert error.error_type == ErrorType.BAD_INPUT
    assert error.field == "pageSize"


def test_paging_rejects_page_index_below_one():
    error, _ = validate_paging(0, 10, max_page_size=50, default_page_size=10)
    assert error.error_type == ErrorType.BAD_INPUT
    assert error.field == "pageIndex"


# ─── validate_sort_field ─────────────────────────────────────────

def test_sort_field_defaults_to_customer_id():
    error, ordering = validate_sort_field(None)
    assert error.is_ok
    assert ordering == (SortableField.CUSTOMER_ID, SortDirection.ASC)


def test_sort_field_blank_is_default():
    _, ordering = validate_sort_field("   ")
    assert ordering == (SortableField.CUSTOMER_ID, SortDirection.ASC)


@pytest.mark.parametrize("raw", ["fullName", "full_name", "FULLNAME", "FullName"])
def test_sort_field_accepts_any_spelling(raw):
    error, ordering = validate_sort_field(raw)
    assert error.is_ok
    assert ordering == (SortableField.FULL_NAME, SortDirection.ASC)


def test_sort_field_id_alias():
    _, ordering = validate_sort_field("id")
    assert ordering[0] == SortableField.CUSTOMER_ID


def test_sort_field_leading_dash_sorts_descending():
    error, ordering = validate_sort_field("-dateOfBirth")
    assert error.is_ok
    assert ordering == (SortableField.DATE_OF_BIRTH, SortDirection.DESC)


def test_sort_field_rejects_unknown_field():
    error, ordering = validate_sort_field("addresses")
    assert error.error_type == ErrorType.BAD_INPUT
    assert error.field == "sortField"
    assert "fullName" in error.message
    assert ordering is None


# ─── identifiers ─────────────────────────────────────────────────

@pytest.mark.parametrize("customer_id", [0, -1, -500])
def test_identifier_rejects_non_positive(customer_id):
    error = validate_identifier(customer_id)
    assert error.error_type == ErrorType.BAD_INPUT
    assert error.field == "customerId"


def test_identifier_accepts_positive():
    assert validate_identifier(1).is_ok


def test_identifier_match_accepts_equal_ids():
    assert validate_identifier_match(7, 7).is_ok


def test_identifier_match_rejects_mismatch():
    error = validate_identifier_match(7, 8)
    assert error.error_type == ErrorType.BAD_INPUT
    assert "does not match" in error.message


def test_identifier_match_rejects_missing_body_id():
    assert validate_identifier_match(7, None).error_type == ErrorType.BAD_INPUT


def test_identifier_match_checks_route_id_first():
    error = validate_identifier_match(0, 0)
    assert error.error_type == ErrorType.BAD_INPUT
    assert "positive" in error.message
