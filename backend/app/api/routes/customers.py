"""Customer Routes — customer picker list and the filtered customers table."""

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_query_service
from app.schemas.dashboard import CustomerField, CustomerRow
from app.services.query_service import QueryService

router = APIRouter(prefix="/api/v1/customers", tags=["customers"])


@router.get("", response_model=list[CustomerField])
async def list_customers(service: QueryService = Depends(get_query_service)):
    """All customers (id + name), ordered by name."""
    return await service.fetch_customers()


@router.get("/table", response_model=list[CustomerRow])
async def customers_table(
    query: str = Query("", max_length=200),
    service: QueryService = Depends(get_query_service),
):
    """Customers matching `query` by name or email, with invoice totals."""
    return await service.fetch_filtered_customers(query)
