"""ORM Models — SQLAlchemy declarative models for the store's tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Invoice.customer_id references Customer.id

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.customer import Customer  # noqa: F401
from app.models.invoice import Invoice  # noqa: F401
from app.models.revenue import Revenue  # noqa: F401
