"""Dashboard Schemas — response models for the read-only query endpoints.

Invariants:
    - Money fields are display strings ("$1,234.56"); amount_cents carries the raw value where kept
    - Customer fields on invoice rows are "" when the customer could not be resolved
"""

from pydantic import BaseModel

from app.core.domain_types import InvoiceStatus


class RevenuePoint(BaseModel):
    month: str
    revenue: float


class RevenueChart(BaseModel):
    revenue: list[RevenuePoint]
    y_axis_labels: list[str]
    top_label: int


class LatestInvoice(BaseModel):
    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    date: str
    amount: str
    status: InvoiceStatus


class CardData(BaseModel):
    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: str
    total_pending_invoices: str


class InvoiceRow(BaseModel):
    """Invoice joined with its customer, amount formatted."""
    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    date: str
    amount: str
    status: InvoiceStatus


class InvoiceDetail(InvoiceRow):
    amount_cents: int


class InvoicePage(BaseModel):
    invoices: list[InvoiceRow]
    current_page: int
    total_pages: int
    pagination: list[int | str]


class CustomerField(BaseModel):
    id: str
    name: str


class CustomerRow(BaseModel):
    """Customer with store-computed invoice totals, money formatted."""
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str
