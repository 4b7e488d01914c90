"""Invoice Routes — filtered listing, detail, and form-driven create/update/delete.

Invariants:
    - Form posts carry customerId, amount and status as plain string fields
    - A successful create/update answers 303 See Other to the invoices view
    - Failed mutations answer with the MutationResult as JSON:
      422 for invalid fields, 503 for store failures
    - Delete answers 200 with the MutationResult on success
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Query, status
from fastapi.responses import JSONResponse, RedirectResponse

from app.api.dependencies import get_mutation_service, get_query_service
from app.core.pagination import generate_pagination, normalize_page
from app.schemas.dashboard import InvoiceDetail, InvoicePage
from app.schemas.invoice import MutationResult
from app.services.mutation_service import MutationService
from app.services.query_service import QueryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/invoices", tags=["invoices"])

FormField = Annotated[str | None, Form()]


@router.get("", response_model=InvoicePage)
async def list_invoices(
    query: str = Query("", max_length=200),
    page: int = Query(1, ge=1),
    service: QueryService = Depends(get_query_service),
):
    """One page of invoices whose customer name or email contains `query`."""
    invoices = await service.fetch_filtered_invoices(query, page)
    total_pages = await service.fetch_invoices_pages(query)
    current_page = normalize_page(page)
    return InvoicePage(
        invoices=invoices,
        current_page=current_page,
        total_pages=total_pages,
        pagination=generate_pagination(current_page, total_pages),
    )


@router.get("/pages")
async def invoice_pages(
    query: str = Query("", max_length=200),
    service: QueryService = Depends(get_query_service),
):
    return {"total_pages": await service.fetch_invoices_pages(query)}


@router.get("/{invoice_id}", response_model=InvoiceDetail)
async def get_invoice(
    invoice_id: str, service: QueryService = Depends(get_query_service),
):
    return await service.fetch_invoice_by_id(invoice_id)


@router.post("")
async def create_invoice(
    customerId: FormField = None,
    amount: FormField = None,
    status_: Annotated[str | None, Form(alias="status")] = None,
    service: MutationService = Depends(get_mutation_service),
):
    """Create an invoice from a submitted form."""
    result = await service.create_invoice(
        {"customerId": customerId, "amount": amount, "status": status_},
    )
    return _respond(result)


@router.post("/{invoice_id}")
async def update_invoice(
    invoice_id: str,
    customerId: FormField = None,
    amount: FormField = None,
    status_: Annotated[str | None, Form(alias="status")] = None,
    service: MutationService = Depends(get_mutation_service),
):
    """Update an invoice from a submitted form."""
    result = await service.update_invoice(
        invoice_id,
        {"customerId": customerId, "amount": amount, "status": status_},
    )
    return _respond(result)


@router.post("/{invoice_id}/delete")
async def delete_invoice(
    invoice_id: str, service: MutationService = Depends(get_mutation_service),
):
    result = await service.delete_invoice(invoice_id)
    return _respond(result)


# Literal: the 422 constant was renamed across Starlette releases
UNPROCESSABLE = 422


def _respond(result: MutationResult):
    if result.success and result.redirect_to:
        return RedirectResponse(
            result.redirect_to, status_code=status.HTTP_303_SEE_OTHER,
        )
    if result.success:
        return result
    code = (
        UNPROCESSABLE if result.errors
        else status.HTTP_503_SERVICE_UNAVAILABLE
    )
    return JSONResponse(status_code=code, content=result.model_dump())
