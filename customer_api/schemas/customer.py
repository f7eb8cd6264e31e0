"""Customer Schemas - request bodies and response shapes for /api/v1/customers.

Invariants:
    - Request fields are loosely typed (str for dates) so that format errors reach
      the core validators and come back as BAD_INPUT with a field name
    - UpdateCustomerRequest fields other than customer_id are optional (partial update)
    - PageResult is generic over its item type
"""

from datetime import date
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True,
    )


# --- Requests -----------------------------------------------------------------

class AddressRequest(CamelModel):
    line1: str | None = None
    line2: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None


class CreateCustomerRequest(CamelModel):
    full_name: str | None = None
    date_of_birth: str | None = None
    addresses: list[AddressRequest] = Field(default_factory=list)


class UpdateCustomerRequest(CamelModel):
    customer_id: int | None = None
    full_name: str | None = None
    date_of_birth: str | None = None
    addresses: list[AddressRequest] | None = None


# --- Responses ----------------------------------------------------------------

class AddressResponse(CamelModel):
    line1: str
    line2: str | None = None
    city: str
    region: str | None = None
    postal_code: str
    country: str


class CustomerResponse(CamelModel):
    customer_id: int
    full_name: str
    date_of_birth: date
    age: int
    addresses: list[AddressResponse] = Field(default_factory=list)


class PageResult(CamelModel, Generic[T]):
    items: list[T]
    page_index: int
    page_size: int
    total_records: int
    total_pages: int


class DeletedCustomerResponse(CamelModel):
    customer_id: int
