"""Customer Mapper - pure structural transformations between request, record and response.

Invariants:
    - No validation here; inputs are already validated and normalized
    - Response addresses keep record order
"""

from datetime import date

from customer_api.core.calculate_age import calculate_age
from customer_api.core.customer_record import AddressRecord, CustomerRecord
from customer_api.core.paging import Page
from customer_api.schemas.customer import (
    AddressRequest, AddressResponse, CustomerResponse, PageResult,
)


def address_payloads(addresses: list[AddressRequest] | None) -> list[dict] | None:
    """Request addresses as plain dicts (snake_case keys) for the core validators."""
    if addresses is None:
        return None
    return [a.model_dump() for a in addresses]


def to_customer_record(
    full_name: str,
    date_of_birth: date,
    addresses: list[AddressRecord],
    today: date,
) -> CustomerRecord:
    return CustomerRecord(
        full_name=full_name,
        date_of_birth=date_of_birth,
        age=calculate_age(date_of_birth, today),
        addresses=list(addresses),
    )


def to_address_response(address: AddressRecord) -> AddressResponse:
    return AddressResponse(
        line1=address.line1,
        line2=address.line2,
        city=address.city,
        region=address.region,
        postal_code=address.postal_code,
        country=address.country,
    )


def to_customer_response(customer: CustomerRecord) -> CustomerResponse:
    return CustomerResponse(
        customer_id=customer.customer_id,
        full_name=customer.full_name,
        date_of_birth=customer.date_of_birth,
        age=customer.age,
        addresses=[to_address_response(a) for a in customer.addresses],
    )


def to_page_result(page: Page[CustomerRecord]) -> PageResult[CustomerResponse]:
    return PageResult[CustomerResponse](
        items=[to_customer_response(c) for c in page.items],
        page_index=page.page_index,
        page_size=page.page_size,
        total_records=page.total_records,
        total_pages=page.total_pages,
    )
