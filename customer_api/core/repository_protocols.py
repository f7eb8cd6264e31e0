"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Repositories exchange CustomerRecord values, never ORM rows

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
    - Async methods: implementations do IO, the service awaits each call in turn
"""

from typing import Protocol

from customer_api.core.customer_record import CustomerRecord
from customer_api.core.domain_types import CustomerId


class CustomerRepository(Protocol):
    """Contract for customer persistence - implemented by infrastructure."""
    async def list_all(self) -> list[CustomerRecord]: ...
    async def get_by_id(self, customer_id: CustomerId) -> CustomerRecord | None: ...
    async def create(self, customer: CustomerRecord) -> CustomerRecord: ...
    async def update(self, customer: CustomerRecord) -> CustomerRecord: ...
    async def delete_by_id(self, customer_id: CustomerId) -> CustomerId: ...
