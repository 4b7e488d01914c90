"""Boundary Protocols — contracts between the services and the remote store.

Invariants:
    - Services NEVER import a concrete store; they receive an InvoiceStore at construction
    - All store methods are async and return plain dicts (row-oriented)
    - Amounts crossing this boundary are integer cents, never formatted strings
    - Text filters are case-insensitive substring matches on customer name OR email,
      evaluated by the store in a single statement

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests pass hand-written fakes
    - Store failures surface as app.core.errors.DatabaseError
"""

from typing import Protocol


class InvoiceStore(Protocol):
    """Contract for invoice/customer/revenue persistence — implemented by shell."""

    # ─── reads ───────────────────────────────────────────────────
    async def list_revenue(self) -> list[dict]: ...
    async def latest_invoices(self, limit: int) -> list[dict]: ...
    async def count_invoices(self) -> int: ...
    async def count_customers(self) -> int: ...
    async def sum_amounts(self, status: str) -> int: ...
    async def search_invoices(
        self, query: str, limit: int, offset: int,
    ) -> list[dict]: ...
    async def count_matching_invoices(self, query: str) -> int: ...
    async def get_invoice(self, invoice_id: str) -> dict | None: ...
    async def list_customers(self) -> list[dict]: ...
    async def search_customers(self, query: str) -> list[dict]: ...

    # ─── writes ──────────────────────────────────────────────────
    async def insert_invoice(self, values: dict) -> str: ...
    async def update_invoice(self, invoice_id: str, values: dict) -> int: ...
    async def delete_invoice(self, invoice_id: str) -> int: ...

    async def health_check(self) -> bool: ...


class PathInvalidator(Protocol):
    """Contract for marking cached views stale after a write."""
    def invalidate(self, path: str) -> None: ...
