"""
Invoice endpoints.

The list view reads ``query`` and ``page`` from the URL and is cached
per search term and page until an invoice mutation invalidates it.
Create and edit accept the invoice form as posted by the browser: a
successful submission answers ``303 See Other`` back to the list, a
rejected one answers with the form state to re‑render (422 for field
errors, 500 when the database refused the write).
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel

from invoice_dashboard.app.core.cache import view_cache
from invoice_dashboard.app.core.security import get_current_user
from invoice_dashboard.app.schemas.customer import CustomerField
from invoice_dashboard.app.schemas.forms import ActionOutcome, Redirect
from invoice_dashboard.app.schemas.invoice import InvoiceEdit, InvoicePage
from invoice_dashboard.app.services.invoice_service import INVOICES_PATH, InvoiceActions
from invoice_dashboard.app.services.query_service import QueryService
from invoice_dashboard.app.utils import generate_pagination


router = APIRouter()


class InvoiceEditPage(BaseModel):
    invoice: InvoiceEdit
    customers: List[CustomerField]


def _respond(outcome: ActionOutcome) -> Response:
    if isinstance(outcome, Redirect):
        return RedirectResponse(url=outcome.path, status_code=status.HTTP_303_SEE_OTHER)
    status_code = (
        status.HTTP_422_UNPROCESSABLE_ENTITY if outcome.errors else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(status_code=status_code, content=outcome.model_dump())


@router.get("", response_model=InvoicePage)
async def list_invoices(
    query: str = "",
    page: int = Query(1, ge=1),
    current_user: dict = Depends(get_current_user),
) -> InvoicePage:
    """One page of the invoice table filtered by ``query``."""
    key = (query, page)
    cached = view_cache.get(INVOICES_PATH, key)
    if cached is not None:
        return cached
    total_pages = await QueryService.fetch_invoices_pages(query)
    result = InvoicePage(
        invoices=await QueryService.fetch_filtered_invoices(query, page),
        total_pages=total_pages,
        pagination=generate_pagination(page, total_pages),
    )
    view_cache.set(INVOICES_PATH, key, result)
    return result


@router.get("/create", response_model=List[CustomerField])
async def create_invoice_form(current_user: dict = Depends(get_current_user)) -> List[CustomerField]:
    """Customers to choose from on the create form."""
    return await QueryService.fetch_customers()


@router.post("/create")
async def create_invoice(request: Request, current_user: dict = Depends(get_current_user)) -> Response:
    form = await request.form()
    return _respond(await InvoiceActions().create_invoice(form))


@router.get("/{invoice_id}/edit", response_model=InvoiceEditPage)
async def edit_invoice_form(invoice_id: str, current_user: dict = Depends(get_current_user)) -> InvoiceEditPage:
    invoice = await QueryService.fetch_invoice_by_id(invoice_id)
    if invoice is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Invoice {invoice_id} not found")
    return InvoiceEditPage(invoice=invoice, customers=await QueryService.fetch_customers())


@router.post("/{invoice_id}/edit")
async def update_invoice(
    invoice_id: str,
    request: Request,
    current_user: dict = Depends(get_current_user),
) -> Response:
    form = await request.form()
    return _respond(await InvoiceActions().update_invoice(invoice_id, form))


@router.post("/{invoice_id}/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(invoice_id: str, current_user: dict = Depends(get_current_user)) -> Response:
    """Delete an invoice.  Storage failures surface as a server error."""
    await InvoiceActions().delete_invoice(invoice_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
