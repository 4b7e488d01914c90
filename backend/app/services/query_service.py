"""Query Service — read-only dashboard queries over an InvoiceStore.

Invariants:
    - Every call is a fresh round trip; nothing is cached
    - Store failures become DataFetchError with a generic message (cause chained, logged)
    - No partial results: one failing sub-query fails the whole call
    - fetch_card_data issues its four store reads concurrently
    - Filtered listings page by ITEMS_PER_PAGE; pages below 1 read as page 1

Design Decisions:
    - Store handle injected at construction (tests pass a fake store)
    - Formatting (currency, calendar ordering) happens here, not in the store
"""

import asyncio
import logging

from app.core.currency import format_currency
from app.core.domain_types import (
    ITEMS_PER_PAGE, LATEST_INVOICES_LIMIT, InvoiceStatus,
)
from app.core.errors import (
    DatabaseError, DataFetchError, ErrorContext, ResourceNotFoundError,
)
from app.core.pagination import normalize_page, page_count, page_offset
from app.core.repository_protocols import InvoiceStore
from app.core.revenue_chart import sort_by_calendar_month
from app.schemas.dashboard import (
    CardData, CustomerField, CustomerRow, InvoiceDetail, InvoiceRow,
    LatestInvoice, RevenuePoint,
)

logger = logging.getLogger(__name__)


class QueryService:
    """Translates dashboard reads into store queries and shapes rows for display."""

    def __init__(self, store: InvoiceStore, revenue_delay_seconds: float = 0.0):
        self._store = store
        self._revenue_delay = revenue_delay_seconds

    async def fetch_revenue(self) -> list[RevenuePoint]:
        try:
            if self._revenue_delay > 0:
                logger.info(f"Delaying revenue query by {self._revenue_delay}s")
                await asyncio.sleep(self._revenue_delay)
            rows = await self._store.list_revenue()
        except DatabaseError as e:
            raise _fetch_failed("fetch_revenue", "Failed to fetch revenue data.", e)
        return [
            RevenuePoint(month=row["month"], revenue=float(row["revenue"]))
            for row in sort_by_calendar_month(rows)
        ]

    async def fetch_latest_invoices(self) -> list[LatestInvoice]:
        try:
            rows = await self._store.latest_invoices(LATEST_INVOICES_LIMIT)
        except DatabaseError as e:
            raise _fetch_failed(
                "fetch_latest_invoices", "Failed to fetch the latest invoices.", e,
            )
        return [
            LatestInvoice(
                id=row["id"],
                customer_id=row["customer_id"],
                name=row.get("name") or "",
                email=row.get("email") or "",
                image_url=row.get("image_url") or "",
                date=row["date"],
                amount=format_currency(row["amount"]),
                status=row["status"],
            )
            for row in rows
        ]

    async def fetch_card_data(self) -> CardData:
        try:
            (
                number_of_invoices, number_of_customers,
                total_paid, total_pending,
            ) = await asyncio.gather(
                self._store.count_invoices(),
                self._store.count_customers(),
                self._store.sum_amounts(InvoiceStatus.PAID.value),
                self._store.sum_amounts(InvoiceStatus.PENDING.value),
            )
        except DatabaseError as e:
            raise _fetch_failed("fetch_card_data", "Failed to fetch card data.", e)
        return CardData(
            number_of_invoices=number_of_invoices or 0,
            number_of_customers=number_of_customers or 0,
            total_paid_invoices=format_currency(total_paid or 0),
            total_pending_invoices=format_currency(total_pending or 0),
        )

    async def fetch_filtered_invoices(
        self, query: str, current_page: int,
    ) -> list[InvoiceRow]:
        offset = page_offset(normalize_page(current_page), ITEMS_PER_PAGE)
        try:
            rows = await self._store.search_invoices(
                query, ITEMS_PER_PAGE, offset,
            )
        except DatabaseError as e:
            raise _fetch_failed(
                "fetch_filtered_invoices", "Failed to fetch invoices.", e,
            )
        return [InvoiceRow(**_format_invoice(row)) for row in rows]

    async def fetch_invoices_pages(self, query: str) -> int:
        try:
            count = await self._store.count_matching_invoices(query)
        except DatabaseError as e:
            raise _fetch_failed(
                "fetch_invoices_pages",
                "Failed to fetch total number of invoices.", e,
            )
        return page_count(count or 0, ITEMS_PER_PAGE)

    async def fetch_invoice_by_id(self, invoice_id: str) -> InvoiceDetail:
        try:
            row = await self._store.get_invoice(invoice_id)
        except DatabaseError as e:
            raise _fetch_failed(
                "fetch_invoice_by_id", "Failed to fetch invoice.", e,
                invoice_id=invoice_id,
            )
        if row is None:
            raise ResourceNotFoundError(
                "Invoice", invoice_id,
                ErrorContext(operation="fetch_invoice_by_id", invoice_id=invoice_id),
            )
        return InvoiceDetail(**_format_invoice(row), amount_cents=row["amount"])

    async def fetch_customers(self) -> list[CustomerField]:
        try:
            rows = await self._store.list_customers()
        except DatabaseError as e:
            raise _fetch_failed(
                "fetch_customers", "Failed to fetch all customers.", e,
            )
        return [CustomerField(id=row["id"], name=row["name"]) for row in rows]

    async def fetch_filtered_customers(self, query: str) -> list[CustomerRow]:
        try:
            rows = await self._store.search_customers(query)
        except DatabaseError as e:
            raise _fetch_failed(
                "fetch_filtered_customers", "Failed to fetch customer table.", e,
            )
        return [
            CustomerRow(
                **{
                    **row,
                    "total_pending": format_currency(row["total_pending"]),
                    "total_paid": format_currency(row["total_paid"]),
                },
            )
            for row in rows
        ]


def _format_invoice(row: dict) -> dict:
    return {
        "id": row["id"],
        "customer_id": row["customer_id"],
        "name": row.get("name") or "",
        "email": row.get("email") or "",
        "image_url": row.get("image_url") or "",
        "date": row["date"],
        "amount": format_currency(row["amount"]),
        "status": row["status"],
    }


def _fetch_failed(
    operation: str, message: str, cause: Exception, invoice_id: str | None = None,
) -> DataFetchError:
    logger.error(
        f"Database Error in {operation}: {cause}",
        extra={"operation": operation, "invoice_id": invoice_id},
        exc_info=cause,
    )
    error = DataFetchError(
        message, ErrorContext(operation=operation, invoice_id=invoice_id),
    )
    error.__cause__ = cause
    return error
