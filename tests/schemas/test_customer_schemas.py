"""Customer Schemas - camelCase wire names, snake_case accepted on input."""

from datetime import date

import pytest
from pydantic import ValidationError

from customer_api.schemas.customer import (
    CreateCustomerRequest,
    CustomerResponse,
    DeletedCustomerResponse,
    PageResult,
    UpdateCustomerRequest,
)


def test_create_request_reads_camel_case():
    req = CreateCustomerRequest.model_validate({
        "fullName": "Ada Lovelace",
        "dateOfBirth": "1815-12-10",
        "addresses": [{"line1": "1 Main St", "postalCode": "12345"}],
    })
    assert req.full_name == "Ada Lovelace"
    assert req.date_of_birth == "1815-12-10"
    assert req.addresses[0].postal_code == "12345"


def test_create_request_reads_snake_case():
    req = CreateCustomerRequest.model_validate({"full_name": "Ada Lovelace"})
    assert req.full_name == "Ada Lovelace"
    assert req.addresses == []


def test_update_request_distinguishes_absent_addresses_from_empty():
    assert UpdateCustomerRequest.model_validate({"customerId": 1}).addresses is None
    assert UpdateCustomerRequest.model_validate(
        {"customerId": 1, "addresses": []},
    ).addresses == []


def test_update_request_rejects_non_integer_id():
    with pytest.raises(ValidationError):
        UpdateCustomerRequest.model_validate({"customerId": "one"})


def test_page_result_dumps_camel_case():
    page = PageResult[CustomerResponse](
        items=[CustomerResponse(
            customer_id=7, full_name="Ada Lovelace",
            date_of_birth=date(1990, 5, 20), age=36,
        )],
        page_index=1, page_size=10, total_records=1, total_pages=1,
    )
    dumped = page.model_dump(by_alias=True, mode="json")
    assert set(dumped) == {"items", "pageIndex", "pageSize", "totalRecords", "totalPages"}
    assert dumped["items"][0]["customerId"] == 7
    assert dumped["items"][0]["dateOfBirth"] == "1990-05-20"


def test_deleted_response_shape():
    assert DeletedCustomerResponse(customer_id=3).model_dump(by_alias=True) == {"customerId": 3}
