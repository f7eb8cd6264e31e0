"""Customer Routes - list, get, create, update and delete customer records.

Invariants:
    - Every route requires a bearer token (require_api_token)
    - Routes hold no business logic; CustomerService validates, maps and persists
    - Each handler is wrapped by logged_action (start/end/failure logging)
    - Query parameters use the wire names pageIndex, pageSize, sortField
"""

import logging

from fastapi import APIRouter, Depends, Query

from customer_api.api.dependencies import get_customer_service, require_api_token
from customer_api.infrastructure.observability import logged_action
from customer_api.schemas.customer import (
    CreateCustomerRequest,
    CustomerResponse,
    DeletedCustomerResponse,
    PageResult,
    UpdateCustomerRequest,
)
from customer_api.services.customer_service import CustomerService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/customers",
    tags=["customers"],
    dependencies=[Depends(require_api_token)],
)


@router.get("", response_model=PageResult[CustomerResponse])
@logged_action("list_customers", logger)
async def list_customers(
    page_index: int | None = Query(None, alias="pageIndex"),
    page_size: int | None = Query(None, alias="pageSize"),
    sort_field: str | None = Query(None, alias="sortField"),
    service: CustomerService = Depends(get_customer_service),
):
    """Page through customers. Sorting and paging happen in memory."""
    return await service.list_customers(page_index, page_size, sort_field)


@router.get("/{customer_id}", response_model=CustomerResponse)
@logged_action("get_customer", logger)
async def get_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
):
    return await service.get_customer(customer_id)


@router.post("", response_model=CustomerResponse)
@logged_action("create_customer", logger)
async def create_customer(
    body: CreateCustomerRequest,
    service: CustomerService = Depends(get_customer_service),
):
    """Create a customer. Returns the stored record with its new customerId."""
    return await service.create_customer(body)


@router.put("/{customer_id}", response_model=CustomerResponse)
@logged_action("update_customer", logger)
async def update_customer(
    customer_id: int,
    body: UpdateCustomerRequest,
    service: CustomerService = Depends(get_customer_service),
):
    """Partial update: only fields present in the body are applied."""
    return await service.update_customer(customer_id, body)


@router.delete("/{customer_id}", response_model=DeletedCustomerResponse)
@logged_action("delete_customer", logger)
async def delete_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
):
    return await service.delete_customer(customer_id)
