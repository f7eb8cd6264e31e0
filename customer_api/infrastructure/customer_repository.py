"""SQL Customer Repository - CustomerRepository implemented on async SQLAlchemy.

Invariants:
    - Returns CustomerRecord values; ORM rows never leave this module
    - Every write commits before returning; the session manager rolls back on error
    - update() replaces the whole address collection (delete-orphan removes old rows)
    - customer_id is read from the database, never written by update()
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.core.customer_record import AddressRecord, CustomerRecord
from customer_api.core.domain_types import CustomerId
from customer_api.core.errors import ResourceNotFoundError
from customer_api.models.customer import Customer
from customer_api.models.customer_address import CustomerAddress

logger = logging.getLogger(__name__)


class SqlCustomerRepository:
    """Customer persistence backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[CustomerRecord]:
        result = await self.db.execute(select(Customer).order_by(Customer.id))
        return [to_record(row) for row in result.scalars().all()]

    async def get_by_id(self, customer_id: CustomerId) -> CustomerRecord | None:
        row = await self._get_row(customer_id)
        return to_record(row) if row else None

    async def create(self, customer: CustomerRecord) -> CustomerRecord:
        row = Customer(
            full_name=customer.full_name,
            date_of_birth=customer.date_of_birth,
            age=customer.age,
            addresses=to_address_rows(customer.addresses),
        )
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row, attribute_names=["addresses"])
        logger.info(
            f"Customer {row.id} created", extra={"customer_id": row.id},
        )
        return to_record(row)

    async def update(self, customer: CustomerRecord) -> CustomerRecord:
        row = await self._get_row(customer.customer_id)
        if row is None:
            raise ResourceNotFoundError("Customer", str(customer.customer_id))
        row.full_name = customer.full_name
        row.date_of_birth = customer.date_of_birth
        row.age = customer.age
        row.addresses = to_address_rows(customer.addresses)
        await self.db.commit()
        await self.db.refresh(row, attribute_names=["addresses"])
        logger.info(
            f"Customer {row.id} updated", extra={"customer_id": row.id},
        )
        return to_record(row)

    async def delete_by_id(self, customer_id: CustomerId) -> CustomerId:
        row = await self._get_row(customer_id)
        if row is None:
            raise ResourceNotFoundError("Customer", str(customer_id))
        await self.db.delete(row)
        await self.db.commit()
        logger.info(
            f"Customer {customer_id} deleted", extra={"customer_id": customer_id},
        )
        return customer_id

    async def _get_row(self, customer_id: int | None) -> Customer | None:
        if customer_id is None:
            return None
        result = await self.db.execute(
            select(Customer).where(Customer.id == customer_id),
        )
        return result.scalar_one_or_none()


# --- Row <-> record mapping ---------------------------------------------------

def to_record(row: Customer) -> CustomerRecord:
    return CustomerRecord(
        customer_id=CustomerId(row.id),
        full_name=row.full_name,
        date_of_birth=row.date_of_birth,
        age=row.age,
        addresses=[
            AddressRecord(
                line1=a.line1,
                line2=a.line2,
                city=a.city,
                region=a.region,
                postal_code=a.postal_code,
                country=a.country,
            )
            for a in sorted(row.addresses, key=lambda a: a.position)
        ],
    )


def to_address_rows(addresses: list[AddressRecord]) -> list[CustomerAddress]:
    return [
        CustomerAddress(
            position=position,
            line1=a.line1,
            line2=a.line2,
            city=a.city,
            region=a.region,
            postal_code=a.postal_code,
            country=a.country,
        )
        for position, a in enumerate(addresses)
    ]
