"""
Pydantic models for customer data.

Customers are created by seeding; the dashboard only lists them and
offers them as choices on the invoice form.
"""

from typing import Optional

from pydantic import BaseModel


class CustomerField(BaseModel):
    """Customer as offered in the invoice form's select box."""

    id: str
    name: str


class CustomerTableRow(BaseModel):
    """Customer with invoice totals for the customers table."""

    id: str
    name: str
    email: str
    image_url: Optional[str] = None
    total_invoices: int
    total_pending: str
    total_paid: str
