"""Customer Service - list, get, create, update and delete for customer records.

Invariants:
    - Every operation validates before it touches the repository for writes
    - First non-OK ErrorInfo is raised via raise_for_error (BAD_INPUT -> 400, NOT_FOUND -> 404)
    - update() calls repository.update at most once, and only when a field changed
    - delete() never calls repository.delete_by_id for a missing customer
    - List loads the whole collection and pages in memory

Design Decisions:
    - today comes from an injectable clock so age and date checks are testable
    - Errors are not caught here; logging happens in the route decorator
"""

import logging
from datetime import date
from typing import Callable

from customer_api.core.customer_update import apply_customer_update
from customer_api.core.domain_types import CustomerId
from customer_api.core.errors import raise_for_error
from customer_api.core.paging import paginate, sort_customers
from customer_api.core.repository_protocols import CustomerRepository
from customer_api.core.validate_customer import (
    validate_addresses,
    validate_customer_exists,
    validate_date_of_birth,
    validate_full_name,
)
from customer_api.core.validate_request import (
    validate_identifier,
    validate_identifier_match,
    validate_paging,
    validate_sort_field,
)
from customer_api.schemas.customer import (
    CreateCustomerRequest,
    CustomerResponse,
    DeletedCustomerResponse,
    PageResult,
    UpdateCustomerRequest,
)
from customer_api.services.customer_mapper import (
    address_payloads,
    to_customer_record,
    to_customer_response,
    to_page_result,
)

logger = logging.getLogger(__name__)


class CustomerService:
    """The five customer operations behind /api/v1/customers."""

    def __init__(
        self,
        repository: CustomerRepository,
        *,
        max_page_size: int,
        default_page_size: int,
        max_customer_age_years: int,
        clock: Callable[[], date] = date.today,
    ):
        self.repository = repository
        self.max_page_size = max_page_size
        self.default_page_size = default_page_size
        self.max_customer_age_years = max_customer_age_years
        self.clock = clock

    async def list_customers(
        self,
        page_index: int | None = None,
        page_size: int | None = None,
        sort_field: str | None = None,
    ) -> PageResult[CustomerResponse]:
        error, paging = validate_paging(
            page_index, page_size, self.max_page_size, self.default_page_size,
        )
        raise_for_error(error)
        error, ordering = validate_sort_field(sort_field)
        raise_for_error(error)

        index, size = paging
        field, direction = ordering
        customers = await self.repository.list_all()
        page = paginate(sort_customers(customers, field, direction), index, size)
        return to_page_result(page)

    async def get_customer(self, customer_id: int) -> CustomerResponse:
        raise_for_error(validate_identifier(customer_id))

        customer = await self.repository.get_by_id(CustomerId(customer_id))
        raise_for_error(validate_customer_exists(customer, customer_id))
        return to_customer_response(customer)

    async def create_customer(self, request: CreateCustomerRequest) -> CustomerResponse:
        today = self.clock()

        error, full_name = validate_full_name(request.full_name)
        raise_for_error(error)
        error, date_of_birth = validate_date_of_birth(
            request.date_of_birth, today, self.max_customer_age_years,
        )
        raise_for_error(error)
        error, addresses = validate_addresses(address_payloads(request.addresses))
        raise_for_error(error)

        record = to_customer_record(full_name, date_of_birth, addresses, today)
        created = await self.repository.create(record)
        return to_customer_response(created)

    async def update_customer(
        self, customer_id: int, request: UpdateCustomerRequest,
    ) -> CustomerResponse:
        raise_for_error(validate_identifier_match(customer_id, request.customer_id))

        current = await self.repository.get_by_id(CustomerId(customer_id))
        raise_for_error(validate_customer_exists(current, customer_id))

        error, outcome = apply_customer_update(
            current,
            full_name=request.full_name,
            date_of_birth=request.date_of_birth,
            addresses=address_payloads(request.addresses),
            today=self.clock(),
            max_age_years=self.max_customer_age_years,
        )
        raise_for_error(error)

        if not outcome.is_modified:
            logger.info(
                f"Customer {customer_id} unchanged, skipping save",
                extra={"customer_id": customer_id},
            )
            return to_customer_response(current)

        saved = await self.repository.update(outcome.customer)
        return to_customer_response(saved)

    async def delete_customer(self, customer_id: int) -> DeletedCustomerResponse:
        raise_for_error(validate_identifier(customer_id))

        existing = await self.repository.get_by_id(CustomerId(customer_id))
        raise_for_error(validate_customer_exists(existing, customer_id))

        deleted_id = await self.repository.delete_by_id(CustomerId(customer_id))
        return DeletedCustomerResponse(customer_id=deleted_id)
