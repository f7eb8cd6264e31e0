"""Infrastructure Layer - database access, repositories and cross-cutting concerns.

Invariants:
    - Infrastructure may import core types and errors, never services/ or api/
    - SQLAlchemy failures surface as core DatabaseError
"""
