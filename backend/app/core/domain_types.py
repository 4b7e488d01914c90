"""Domain Types — shared enums and constants for invoices, customers and revenue.

Invariants:
    - Invoice status is always one of InvoiceStatus (no raw string matching)
    - Amounts are integer cents everywhere below the presentation boundary
    - ITEMS_PER_PAGE is the single page size for every paginated invoice query
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice lifecycle states — maps to DB `status` column."""
    PENDING = "pending"
    PAID = "paid"


# ─── Constants ───────────────────────────────────────────────────

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5
INVOICES_PATH = "/dashboard/invoices"

# invoices.amount is a 32-bit INTEGER column
MAX_INVOICE_AMOUNT_CENTS = 2**31 - 1
