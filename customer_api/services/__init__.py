"""Services Layer - orchestrates validators, mapper and repository per operation.

Invariants:
    - Services own the order: validate -> map/mutate -> repository -> map to response
    - No validation failure is followed by a repository write
"""
