"""ORM Models - SQLAlchemy declarative models for customers and their addresses.

Invariants:
    - All models inherit from Base (db/base.py)
    - Customer is the aggregate root; addresses are owned and cascade-deleted

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from customer_api.models.customer import Customer  # noqa: F401
from customer_api.models.customer_address import CustomerAddress  # noqa: F401
