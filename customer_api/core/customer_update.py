"""Partial Update - applies the fields present in an update request to a loaded customer.

Invariants:
    - PURE: operates on a copy; the loaded record is never mutated
    - Only fields that are present (not None) are validated and applied
    - A field counts as changed only when its normalized value differs
    - addresses, when present, replace the whole collection (no merge)
    - age is recomputed whenever the result will be persisted
    - First validation error wins; no partial result is returned with an error
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from customer_api.core.calculate_age import calculate_age
from customer_api.core.customer_record import CustomerRecord
from customer_api.core.domain_types import OK, ErrorInfo
from customer_api.core.validate_customer import (
    validate_addresses, validate_date_of_birth, validate_full_name,
)


@dataclass
class UpdateOutcome:
    customer: CustomerRecord
    changed_fields: list[str] = field(default_factory=list)

    @property
    def is_modified(self) -> bool:
        return bool(self.changed_fields)


def apply_customer_update(
    current: CustomerRecord,
    *,
    full_name: str | None,
    date_of_birth: str | date | None,
    addresses: Sequence[Mapping[str, Any]] | None,
    today: date,
    max_age_years: int,
) -> tuple[ErrorInfo, UpdateOutcome | None]:
    """Validate and apply present fields. Returns (error, outcome)."""
    updated = current.copy()
    changed: list[str] = []

    if full_name is not None:
        error, normalized = validate_full_name(full_name)
        if not error.is_ok:
            return error, None
        if normalized != current.full_name:
            updated.full_name = normalized
            changed.append("full_name")

    if date_of_birth is not None:
        error, parsed = validate_date_of_birth(date_of_birth, today, max_age_years)
        if not error.is_ok:
            return error, None
        if parsed != current.date_of_birth:
            updated.date_of_birth = parsed
            changed.append("date_of_birth")

    if addresses is not None:
        error, records = validate_addresses(addresses)
        if not error.is_ok:
            return error, None
        if records != current.addresses:
            updated.addresses = records
            changed.append("addresses")

    if changed:
        updated.age = calculate_age(updated.date_of_birth, today)
    return OK, UpdateOutcome(customer=updated, changed_fields=changed)
