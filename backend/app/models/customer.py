"""Customer ORM — a billable customer owning zero or more invoices.

Invariants:
    - name and email are non-nullable
    - Aggregates (total_invoices, total_pending, total_paid) are never stored;
      the store computes them per query
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Customer(Base):
    """Customer entity."""
    __tablename__ = "customers"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(
        String(255), nullable=False, default="",
    )

    invoices: Mapped[list["Invoice"]] = relationship(
        "Invoice", back_populates="customer",
    )
