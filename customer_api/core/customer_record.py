"""Customer Records - storage-neutral shapes passed between service and repository.

Invariants:
    - customer_id is None until the repository assigns it, then never changes
    - addresses is ordered; position in the list is the persisted order
    - age is derived from date_of_birth and recomputed on every write
"""

from dataclasses import dataclass, field, replace
from datetime import date

from customer_api.core.domain_types import CustomerId


@dataclass(frozen=True)
class AddressRecord:
    line1: str
    city: str
    postal_code: str
    country: str
    line2: str | None = None
    region: str | None = None


@dataclass
class CustomerRecord:
    full_name: str
    date_of_birth: date
    age: int
    addresses: list[AddressRecord] = field(default_factory=list)
    customer_id: CustomerId | None = None

    def copy(self) -> "CustomerRecord":
        """Shallow copy with an independent address list."""
        return replace(self, addresses=list(self.addresses))
