"""Customer Validation - full name, date of birth, address and existence checks.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Transforming validators return (ErrorInfo, normalized value); value is None on error
    - Address collections fail on the first invalid entry (first error wins)
    - Error field names use the JSON (camelCase) spelling clients send
"""

import re
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import Any

from customer_api.core.calculate_age import calculate_age
from customer_api.core.customer_record import AddressRecord, CustomerRecord
from customer_api.core.domain_types import OK, ErrorInfo

FULL_NAME_MIN_LENGTH = 2
FULL_NAME_MAX_LENGTH = 100
FULL_NAME_PUNCTUATION = frozenset(" -'.")

ADDRESS_LINE_MAX_LENGTH = 200
ADDRESS_CITY_MAX_LENGTH = 100
POSTAL_CODE_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 \-]{1,9}$")
COUNTRY_CODE_PATTERN = re.compile(r"^[A-Za-z]{2}$")

_WHITESPACE = re.compile(r"\s+")
_WORD_START = re.compile(r"(^|[ \-])([^\W\d_])")


# --- Full name ----------------------------------------------------------------

def validate_full_name(full_name: str | None) -> tuple[ErrorInfo, str | None]:
    """Required; letters plus space, hyphen, apostrophe, period. Returns normalized name."""
    if full_name is None:
        return ErrorInfo.bad_input("fullName is required.", "fullName"), None

    name = normalize_full_name(full_name)
    if not name:
        return ErrorInfo.bad_input(
            "fullName cannot be empty or whitespace.", "fullName",
        ), None
    # Length is checked after upper-casing, which can grow a name ("ß" -> "SS")
    if not FULL_NAME_MIN_LENGTH <= len(name) <= FULL_NAME_MAX_LENGTH:
        return ErrorInfo.bad_input(
            f"fullName must be {FULL_NAME_MIN_LENGTH}-{FULL_NAME_MAX_LENGTH} characters.",
            "fullName",
        ), None
    invalid = sorted({ch for ch in name if not (ch.isalpha() or ch in FULL_NAME_PUNCTUATION)})
    if invalid:
        return ErrorInfo.bad_input(
            f"fullName contains invalid characters: {''.join(invalid)!r}.", "fullName",
        ), None
    if not name[0].isalpha():
        return ErrorInfo.bad_input("fullName must start with a letter.", "fullName"), None

    return OK, name


def normalize_full_name(name: str) -> str:
    """Collapse whitespace and upper-case the first letter of each name part."""
    collapsed = _WHITESPACE.sub(" ", name).strip()
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), collapsed)


# --- Date of birth ------------------------------------------------------------

def validate_date_of_birth(
    date_of_birth: str | date | None, today: date, max_age_years: int,
) -> tuple[ErrorInfo, date | None]:
    """Required ISO date, not in the future, at most max_age_years old."""
    if date_of_birth is None:
        return ErrorInfo.bad_input("dateOfBirth is required.", "dateOfBirth"), None

    parsed = _parse_date(date_of_birth)
    if parsed is None:
        return ErrorInfo.bad_input(
            f"dateOfBirth '{date_of_birth}' is not a valid ISO date (YYYY-MM-DD).",
            "dateOfBirth",
        ), None
    if parsed > today:
        return ErrorInfo.bad_input(
            f"dateOfBirth {parsed.isoformat()} is in the future.", "dateOfBirth",
        ), None
    if calculate_age(parsed, today) > max_age_years:
        return ErrorInfo.bad_input(
            f"dateOfBirth {parsed.isoformat()} implies an age over {max_age_years} years.",
            "dateOfBirth",
        ), None
    return OK, parsed


def _parse_date(value: str | date) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


# --- Addresses ----------------------------------------------------------------

def validate_address(
    address: Mapping[str, Any], index: int = 0,
) -> tuple[ErrorInfo, AddressRecord | None]:
    """Validate one address entry. Returns a trimmed AddressRecord."""
    prefix = f"addresses[{index}]"

    line1 = _clean(address.get("line1"))
    line2 = _clean(address.get("line2"))
    city = _clean(address.get("city"))
    region = _clean(address.get("region"))
    postal_code = _clean(address.get("postal_code"))
    country = _clean(address.get("country"))

    error = (
        _required(line1, f"{prefix}.line1", ADDRESS_LINE_MAX_LENGTH)
        or _optional(line2, f"{prefix}.line2", ADDRESS_LINE_MAX_LENGTH)
        or _required(city, f"{prefix}.city", ADDRESS_CITY_MAX_LENGTH)
        or _optional(region, f"{prefix}.region", ADDRESS_CITY_MAX_LENGTH)
        or _matches(postal_code, f"{prefix}.postalCode", POSTAL_CODE_PATTERN)
        or _matches(country, f"{prefix}.country", COUNTRY_CODE_PATTERN)
    )
    if error:
        return error, None

    return OK, AddressRecord(
        line1=line1,
        line2=line2,
        city=city,
        region=region,
        postal_code=postal_code.upper(),
        country=country.upper(),
    )


def validate_addresses(
    addresses: Sequence[Mapping[str, Any]] | None,
) -> tuple[ErrorInfo, list[AddressRecord] | None]:
    """Validate every entry in order. Missing collection is an empty one."""
    records: list[AddressRecord] = []
    for index, address in enumerate(addresses or []):
        error, record = validate_address(address, index)
        if not error.is_ok:
            return error, None
        records.append(record)
    return OK, records


def _clean(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _required(value: str | None, field: str, max_length: int) -> ErrorInfo | None:
    if value is None:
        return ErrorInfo.bad_input(f"{field} is required.", field)
    return _optional(value, field, max_length)


def _optional(value: str | None, field: str, max_length: int) -> ErrorInfo | None:
    if value is not None and len(value) > max_length:
        return ErrorInfo.bad_input(
            f"{field} must be at most {max_length} characters.", field,
        )
    return None


def _matches(value: str | None, field: str, pattern: re.Pattern) -> ErrorInfo | None:
    if value is None:
        return ErrorInfo.bad_input(f"{field} is required.", field)
    if not pattern.match(value):
        return ErrorInfo.bad_input(f"{field} '{value}' has an invalid format.", field)
    return None


# --- Existence ----------------------------------------------------------------

def validate_customer_exists(
    customer: CustomerRecord | None, customer_id: int,
) -> ErrorInfo:
    """Loaded record must exist and carry the requested id."""
    if customer is None or customer.customer_id != customer_id:
        return ErrorInfo.not_found(
            f"Customer '{customer_id}' not found.", "customerId", str(customer_id),
        )
    return OK
