"""Dashboard Routes — revenue chart, latest invoices and summary cards."""

import logging

from fastapi import APIRouter, Depends

from app.api.dependencies import get_query_service
from app.core.revenue_chart import generate_y_axis
from app.schemas.dashboard import CardData, LatestInvoice, RevenueChart
from app.services.query_service import QueryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("/revenue", response_model=RevenueChart)
async def get_revenue(service: QueryService = Depends(get_query_service)):
    """Monthly revenue with y-axis labels for the chart."""
    revenue = await service.fetch_revenue()
    labels, top_label = generate_y_axis([point.model_dump() for point in revenue])
    return RevenueChart(revenue=revenue, y_axis_labels=labels, top_label=top_label)


@router.get("/latest-invoices", response_model=list[LatestInvoice])
async def get_latest_invoices(
    service: QueryService = Depends(get_query_service),
):
    return await service.fetch_latest_invoices()


@router.get("/cards", response_model=CardData)
async def get_card_data(service: QueryService = Depends(get_query_service)):
    return await service.fetch_card_data()
