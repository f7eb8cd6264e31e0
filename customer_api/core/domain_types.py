"""Domain Types - identity types, enums and the ErrorInfo result used by validators.

Invariants:
    - CustomerId wraps a positive int assigned by storage
    - ErrorInfo with ErrorType.OK is the only success value a validator returns
    - SortableField enumerates every field List may order by

Design Decisions:
    - ErrorInfo is returned, never raised: the service decides how to surface it
    - str Enums serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CustomerId = NewType("CustomerId", int)


# ─── Enums ───────────────────────────────────────────────────────

class ErrorType(str, Enum):
    """Outcome classification for validators."""
    OK = "ok"
    BAD_INPUT = "bad_input"
    NOT_FOUND = "not_found"
    UNEXPECTED = "unexpected"


class SortableField(str, Enum):
    """Customer fields List accepts as sortField. Value = record attribute."""
    CUSTOMER_ID = "customer_id"
    FULL_NAME = "full_name"
    DATE_OF_BIRTH = "date_of_birth"
    AGE = "age"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# ─── Validation Result ───────────────────────────────────────────

@dataclass(frozen=True)
class ErrorInfo:
    """Structured validator outcome: error type plus message context."""
    error_type: ErrorType = ErrorType.OK
    message: str = ""
    field: str | None = None
    value: str | None = None

    @property
    def is_ok(self) -> bool:
        return self.error_type == ErrorType.OK

    @classmethod
    def ok(cls) -> "ErrorInfo":
        return cls()

    @classmethod
    def bad_input(cls, message: str, field: str | None = None) -> "ErrorInfo":
        return cls(ErrorType.BAD_INPUT, message, field)

    @classmethod
    def not_found(
        cls, message: str, field: str | None = None, value: str | None = None,
    ) -> "ErrorInfo":
        return cls(ErrorType.NOT_FOUND, message, field, value)


OK = ErrorInfo.ok()

