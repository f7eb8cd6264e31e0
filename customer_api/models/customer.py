"""Customer ORM - persists the customer aggregate root.

Invariants:
    - id is an autoincrement integer primary key assigned on insert
    - full_name stored normalized; date_of_birth is a calendar date
    - age is denormalized from date_of_birth and rewritten on every save
    - addresses ordered by position; delete-orphan gives full-replacement semantics
"""

from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from customer_api.db.base import Base


class Customer(Base):
    """Customer aggregate root - owns its addresses."""
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    addresses: Mapped[list["CustomerAddress"]] = relationship(
        "CustomerAddress", back_populates="customer",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="CustomerAddress.position",
    )
