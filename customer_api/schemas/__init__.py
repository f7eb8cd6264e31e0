"""Pydantic Schemas - request/response contracts for the customer endpoints.

Invariants:
    - JSON field names are camelCase; request bodies also accept snake_case
    - Schemas check shape only; business validation lives in core/validate_*
"""
