"""Service test fixtures — SQLite-backed store over a fresh file database.

Invariants:
    - Every SQL test gets a fresh SQLite file database under tmp_path
    - Seed data is deterministic: fixed ids, dates and amounts

Design Decisions:
    - File database over :memory: so concurrent sessions see the same data
"""

import datetime
import uuid

import pytest

from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.invoice_store import SqlInvoiceStore
from app.models.customer import Customer
from app.models.invoice import Invoice
from app.models.revenue import Revenue
from tests.services.seed_data import CUSTOMERS, INVOICES, REVENUE


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'store.db'}",
    )
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
async def sql_store(db_manager):
    return SqlInvoiceStore(db_manager)


@pytest.fixture
async def seeded_sql_store(db_manager, sql_store):
    """SqlInvoiceStore over a database holding CUSTOMERS, INVOICES and REVENUE."""
    async with db_manager.session() as session:
        session.add_all([
            Customer(
                id=uuid.UUID(c["id"]), name=c["name"],
                email=c["email"], image_url=c["image_url"],
            )
            for c in CUSTOMERS
        ])
        await session.flush()
        session.add_all([
            Invoice(
                id=uuid.UUID(i["id"]), customer_id=uuid.UUID(i["customer_id"]),
                amount=i["amount"], status=i["status"],
                date=datetime.date.fromisoformat(i["date"]),
            )
            for i in INVOICES
        ])
        session.add_all([Revenue(**r) for r in REVENUE])
        await session.commit()
    return sql_store

