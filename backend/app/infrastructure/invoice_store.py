"""SQL Invoice Store — InvoiceStore implementation over SQLAlchemy's asyncio extension.

Invariants:
    - Each method opens its own session (safe to run several methods concurrently)
    - Joined reads are one statement: invoices LEFT JOIN customers
    - Text filters are case-insensitive substring matches on customer name OR email,
      with % and _ in the query matched literally
    - Malformed ids behave like unknown ids (no row, no error)
    - Customer aggregates are computed in SQL, never in Python
"""

import logging
import uuid

from sqlalchemy import case, delete, func, insert, or_, select, update

from app.core.domain_types import InvoiceStatus
from app.core.errors import DatabaseError
from app.infrastructure.database import DatabaseSessionManager
from app.models.customer import Customer
from app.models.invoice import Invoice
from app.models.revenue import Revenue

logger = logging.getLogger(__name__)


def _parse_id(raw: str | uuid.UUID) -> uuid.UUID | None:
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        return None


def _matches(query: str):
    """WHERE clause for the name/email substring filter."""
    return or_(
        Customer.name.icontains(query, autoescape=True),
        Customer.email.icontains(query, autoescape=True),
    )


def _joined_invoice_columns():
    return (
        Invoice.id,
        Invoice.customer_id,
        Invoice.amount,
        Invoice.status,
        Invoice.date,
        func.coalesce(Customer.name, "").label("name"),
        func.coalesce(Customer.email, "").label("email"),
        func.coalesce(Customer.image_url, "").label("image_url"),
    )


def _invoice_row(row) -> dict:
    return {
        "id": str(row.id),
        "customer_id": str(row.customer_id),
        "amount": int(row.amount),
        "status": row.status,
        "date": row.date.isoformat(),
        "name": row.name,
        "email": row.email,
        "image_url": row.image_url,
    }


class SqlInvoiceStore:
    """Store adapter — every call is a fresh round trip."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    # ─── reads ───────────────────────────────────────────────────

    async def list_revenue(self) -> list[dict]:
        async with self._db.session() as session:
            result = await session.execute(
                select(Revenue.month, Revenue.revenue),
            )
            return [
                {"month": r.month, "revenue": r.revenue} for r in result
            ]

    async def latest_invoices(self, limit: int) -> list[dict]:
        stmt = (
            select(*_joined_invoice_columns())
            .outerjoin(Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(limit)
        )
        async with self._db.session() as session:
            result = await session.execute(stmt)
            return [_invoice_row(r) for r in result]

    async def count_invoices(self) -> int:
        async with self._db.session() as session:
            return await session.scalar(
                select(func.count()).select_from(Invoice),
            ) or 0

    async def count_customers(self) -> int:
        async with self._db.session() as session:
            return await session.scalar(
                select(func.count()).select_from(Customer),
            ) or 0

    async def sum_amounts(self, status: str) -> int:
        stmt = select(func.coalesce(func.sum(Invoice.amount), 0)).where(
            Invoice.status == InvoiceStatus(status).value,
        )
        async with self._db.session() as session:
            return int(await session.scalar(stmt) or 0)

    async def search_invoices(
        self, query: str, limit: int, offset: int,
    ) -> list[dict]:
        stmt = (
            select(*_joined_invoice_columns())
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(_matches(query))
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(limit)
            .offset(offset)
        )
        async with self._db.session() as session:
            result = await session.execute(stmt)
            return [_invoice_row(r) for r in result]

    async def count_matching_invoices(self, query: str) -> int:
        stmt = (
            select(func.count(Invoice.id))
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(_matches(query))
        )
        async with self._db.session() as session:
            return await session.scalar(stmt) or 0

    async def get_invoice(self, invoice_id: str) -> dict | None:
        parsed = _parse_id(invoice_id)
        if parsed is None:
            return None
        stmt = (
            select(*_joined_invoice_columns())
            .outerjoin(Customer, Invoice.customer_id == Customer.id)
            .where(Invoice.id == parsed)
        )
        async with self._db.session() as session:
            row = (await session.execute(stmt)).one_or_none()
            return _invoice_row(row) if row else None

    async def list_customers(self) -> list[dict]:
        async with self._db.session() as session:
            result = await session.execute(
                select(Customer.id, Customer.name).order_by(Customer.name),
            )
            return [{"id": str(r.id), "name": r.name} for r in result]

    async def search_customers(self, query: str) -> list[dict]:
        pending = case(
            (Invoice.status == InvoiceStatus.PENDING.value, Invoice.amount),
            else_=0,
        )
        paid = case(
            (Invoice.status == InvoiceStatus.PAID.value, Invoice.amount),
            else_=0,
        )
        stmt = (
            select(
                Customer.id,
                Customer.name,
                Customer.email,
                Customer.image_url,
                func.count(Invoice.id).label("total_invoices"),
                func.coalesce(func.sum(pending), 0).label("total_pending"),
                func.coalesce(func.sum(paid), 0).label("total_paid"),
            )
            .outerjoin(Invoice, Invoice.customer_id == Customer.id)
            .where(_matches(query))
            .group_by(
                Customer.id, Customer.name, Customer.email, Customer.image_url,
            )
            .order_by(Customer.name)
        )
        async with self._db.session() as session:
            result = await session.execute(stmt)
            return [
                {
                    "id": str(r.id),
                    "name": r.name,
                    "email": r.email,
                    "image_url": r.image_url,
                    "total_invoices": int(r.total_invoices),
                    "total_pending": int(r.total_pending),
                    "total_paid": int(r.total_paid),
                }
                for r in result
            ]

    # ─── writes ──────────────────────────────────────────────────

    async def insert_invoice(self, values: dict) -> str:
        invoice_id = uuid.uuid4()
        stmt = insert(Invoice).values(
            id=invoice_id,
            customer_id=_require_id(values["customer_id"]),
            amount=values["amount"],
            status=values["status"],
            date=values["date"],
        )
        async with self._db.session() as session:
            await session.execute(stmt)
            await session.commit()
        logger.info(
            f"Invoice {invoice_id} inserted",
            extra={"invoice_id": str(invoice_id), "operation": "insert"},
        )
        return str(invoice_id)

    async def update_invoice(self, invoice_id: str, values: dict) -> int:
        parsed = _parse_id(invoice_id)
        if parsed is None:
            return 0
        changes = dict(values)
        if "customer_id" in changes:
            changes["customer_id"] = _require_id(changes["customer_id"])
        stmt = update(Invoice).where(Invoice.id == parsed).values(**changes)
        async with self._db.session() as session:
            result = await session.execute(stmt)
            await session.commit()
            return result.rowcount

    async def delete_invoice(self, invoice_id: str) -> int:
        parsed = _parse_id(invoice_id)
        if parsed is None:
            return 0
        async with self._db.session() as session:
            result = await session.execute(
                delete(Invoice).where(Invoice.id == parsed),
            )
            await session.commit()
            return result.rowcount

    async def health_check(self) -> bool:
        return await self._db.health_check()


def _require_id(raw: str) -> uuid.UUID:
    """Parse a foreign key; a malformed one fails the write."""
    parsed = _parse_id(raw)
    if parsed is None:
        raise DatabaseError(f"malformed customer id {raw!r}", "write")
    return parsed
