"""
Customer table endpoint.
"""

from typing import List

from fastapi import APIRouter, Depends

from invoice_dashboard.app.core.security import get_current_user
from invoice_dashboard.app.schemas.customer import CustomerTableRow
from invoice_dashboard.app.services.query_service import QueryService


router = APIRouter()


@router.get("", response_model=List[CustomerTableRow])
async def list_customers(query: str = "", current_user: dict = Depends(get_current_user)) -> List[CustomerTableRow]:
    """Customers whose name or email contains ``query``, with invoice totals."""
    return await QueryService.fetch_filtered_customers(query)
