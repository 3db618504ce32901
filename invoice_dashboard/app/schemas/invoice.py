"""
Pydantic models for invoice data.

``InvoiceForm`` describes a create/edit submission as it arrives from
the browser: every value is a string keyed by the form field name.
The identifier and the issue date are not part of the form; the
database assigns the former and the service derives the latter.
The remaining models describe rows rendered by the dashboard.
"""

from decimal import Decimal
from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


InvoiceStatus = Literal["pending", "paid"]


class InvoiceForm(BaseModel):
    """Create/edit invoice submission."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    customer_id: str = Field(..., alias="customerId", min_length=1)
    # Coerced from the submitted string; whole cents only, and small enough
    # that the cents value fits in a 64-bit SQLite INTEGER.
    amount: Decimal = Field(..., gt=0, max_digits=17, decimal_places=2, allow_inf_nan=False)
    status: InvoiceStatus


class InvoiceEdit(BaseModel):
    """Invoice prepared for the edit form, amount in dollars."""

    id: str
    customer_id: str
    amount: Decimal
    status: InvoiceStatus


class InvoiceTableRow(BaseModel):
    """Row of the paginated invoice table."""

    id: str
    customer_id: str
    name: str
    email: str
    image_url: str | None = None
    date: str
    amount: int
    amount_display: str
    status: InvoiceStatus


class LatestInvoice(BaseModel):
    id: str
    name: str
    email: str
    image_url: str | None = None
    amount: str


class CardData(BaseModel):
    """Totals shown on the dashboard overview cards."""

    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: str
    total_pending_invoices: str


class InvoicePage(BaseModel):
    """Payload of ``GET /dashboard/invoices``."""

    invoices: List[InvoiceTableRow]
    total_pages: int
    pagination: List[Union[int, str]]


class OverviewPage(BaseModel):
    cards: CardData
    latest_invoices: List[LatestInvoice]
