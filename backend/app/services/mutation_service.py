"""Mutation Service — validate-then-write invoice mutations over an InvoiceStore.

Per operation: Idle -> Validating -> (Invalid | Persisting) -> (Failed | Committed).

Invariants:
    - Invalid forms never reach the store
    - Store failures are logged and collapse to a generic message; the cause is discarded
    - Every mutation returns a MutationResult; none raise on validation or store failure
    - The invoices view is invalidated only after a committed write
    - create/update success carries redirect_to=INVOICES_PATH; delete success does not
    - No idempotency key: retrying a failed create may duplicate the invoice
"""

import logging
from collections.abc import Mapping
from datetime import datetime, timezone

from app.core.domain_types import INVOICES_PATH
from app.core.errors import DatabaseError
from app.core.repository_protocols import InvoiceStore, PathInvalidator
from app.schemas.invoice import MutationResult, parse_invoice_form

logger = logging.getLogger(__name__)


class MutationService:
    """Creates, updates and deletes invoices from submitted form fields."""

    def __init__(self, store: InvoiceStore, invalidator: PathInvalidator):
        self._store = store
        self._invalidator = invalidator

    async def create_invoice(self, fields: Mapping[str, object]) -> MutationResult:
        form, errors = parse_invoice_form(fields)
        if form is None:
            return MutationResult.invalid(
                errors, "Missing Fields. Failed to Create Invoice.",
            )

        try:
            invoice_id = await self._store.insert_invoice({
                "customer_id": form.customer_id,
                "amount": form.amount_cents,
                "status": form.status.value,
                "date": _today(),
            })
        except DatabaseError as e:
            _log_store_failure("create_invoice", e)
            return MutationResult.failed("Database Error: Failed to Create Invoice.")

        logger.info(
            f"Created invoice {invoice_id}",
            extra={"operation": "create_invoice", "invoice_id": invoice_id},
        )
        return self._committed(redirect_to=INVOICES_PATH)

    async def update_invoice(
        self, invoice_id: str, fields: Mapping[str, object],
    ) -> MutationResult:
        form, errors = parse_invoice_form(fields)
        if form is None:
            return MutationResult.invalid(
                errors, "Missing Fields. Failed to Update Invoice.",
            )

        try:
            updated = await self._store.update_invoice(invoice_id, {
                "customer_id": form.customer_id,
                "amount": form.amount_cents,
                "status": form.status.value,
            })
        except DatabaseError as e:
            _log_store_failure("update_invoice", e, invoice_id)
            return MutationResult.failed("Database Error: Failed to Update Invoice.")

        if not updated:
            logger.warning(
                f"Update matched no invoice {invoice_id}",
                extra={"operation": "update_invoice", "invoice_id": invoice_id},
            )
        return self._committed(redirect_to=INVOICES_PATH)

    async def delete_invoice(self, invoice_id: str) -> MutationResult:
        try:
            deleted = await self._store.delete_invoice(invoice_id)
        except DatabaseError as e:
            _log_store_failure("delete_invoice", e, invoice_id)
            return MutationResult.failed("Database Error: Failed to Delete Invoice.")

        if not deleted:
            logger.warning(
                f"Delete matched no invoice {invoice_id}",
                extra={"operation": "delete_invoice", "invoice_id": invoice_id},
            )
        return self._committed(message="Deleted Invoice.")

    def _committed(
        self, message: str | None = None, redirect_to: str | None = None,
    ) -> MutationResult:
        self._invalidator.invalidate(INVOICES_PATH)
        return MutationResult.ok(message=message, redirect_to=redirect_to)


def _today():
    return datetime.now(timezone.utc).date()


def _log_store_failure(
    operation: str, error: Exception, invoice_id: str | None = None,
) -> None:
    logger.error(
        f"Database Error in {operation}: {error}",
        extra={"operation": operation, "invoice_id": invoice_id},
        exc_info=True,
    )
