"""Customer API Package - CRUD service for customer records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
