"""
Dashboard overview: totals cards and the latest invoices.
"""

from fastapi import APIRouter, Depends

from invoice_dashboard.app.core.security import get_current_user
from invoice_dashboard.app.schemas.invoice import OverviewPage
from invoice_dashboard.app.services.query_service import QueryService


router = APIRouter()


@router.get("", response_model=OverviewPage)
async def overview(current_user: dict = Depends(get_current_user)) -> OverviewPage:
    return OverviewPage(
        cards=await QueryService.fetch_card_data(),
        latest_invoices=await QueryService.fetch_latest_invoices(),
    )
