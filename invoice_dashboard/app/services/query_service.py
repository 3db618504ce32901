"""
Read queries backing the dashboard views.

The invoice table is searched across customer name, email, amount,
date and status, newest first, ``settings.items_per_page`` rows per
page.  SQLite's ``LIKE`` is case‑insensitive for ASCII, which gives
the table its case‑insensitive search.
"""

import math
from decimal import Decimal
from typing import List, Optional

from ..core.config import settings
from ..core.db import get_connection
from ..schemas.customer import CustomerField, CustomerTableRow
from ..schemas.invoice import CardData, InvoiceEdit, InvoiceTableRow, LatestInvoice
from ..utils import format_currency


_INVOICE_SEARCH = """
    FROM invoices
    JOIN customers ON invoices.customer_id = customers.id
    WHERE customers.name LIKE ?
       OR customers.email LIKE ?
       OR CAST(invoices.amount AS TEXT) LIKE ?
       OR invoices.date LIKE ?
       OR invoices.status LIKE ?
"""


def _pattern(query: str) -> str:
    return f"%{query}%"


class QueryService:
    """Read‑only queries for the dashboard pages."""

    @classmethod
    async def fetch_filtered_invoices(cls, query: str = "", page: int = 1) -> List[InvoiceTableRow]:
        """Return one page of invoices matching ``query``."""
        limit = settings.items_per_page
        offset = (max(page, 1) - 1) * limit
        pattern = _pattern(query)
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT invoices.id, invoices.customer_id, invoices.amount, invoices.date,
                       invoices.status, customers.name, customers.email, customers.image_url
                """
                + _INVOICE_SEARCH
                + """
                ORDER BY invoices.date DESC, invoices.rowid DESC
                LIMIT ? OFFSET ?
                """,
                (pattern,) * 5 + (limit, offset),
            ).fetchall()
        finally:
            conn.close()
        return [
            InvoiceTableRow(
                id=row["id"],
                customer_id=row["customer_id"],
                name=row["name"],
                email=row["email"],
                image_url=row["image_url"],
                date=row["date"],
                amount=row["amount"],
                amount_display=format_currency(row["amount"]),
                status=row["status"],
            )
            for row in rows
        ]

    @classmethod
    async def fetch_invoices_pages(cls, query: str = "") -> int:
        """Number of pages needed to show every invoice matching ``query``."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT COUNT(*) AS count" + _INVOICE_SEARCH,
                (_pattern(query),) * 5,
            ).fetchone()
        finally:
            conn.close()
        return math.ceil(row["count"] / settings.items_per_page)

    @classmethod
    async def fetch_invoice_by_id(cls, invoice_id: str) -> Optional[InvoiceEdit]:
        """Load an invoice for the edit form, with the amount in dollars."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, customer_id, amount, status FROM invoices WHERE id = ?",
                (invoice_id,),
            ).fetchone()
        finally:
            conn.close()
        if row is None:
            return None
        return InvoiceEdit(
            id=row["id"],
            customer_id=row["customer_id"],
            amount=Decimal(row["amount"]) / 100,
            status=row["status"],
        )

    @classmethod
    async def fetch_customers(cls) -> List[CustomerField]:
        conn = get_connection()
        try:
            rows = conn.execute("SELECT id, name FROM customers ORDER BY name ASC").fetchall()
        finally:
            conn.close()
        return [CustomerField(id=row["id"], name=row["name"]) for row in rows]

    @classmethod
    async def fetch_filtered_customers(cls, query: str = "") -> List[CustomerTableRow]:
        """Customers matching ``query`` by name or email, with invoice totals."""
        pattern = _pattern(query)
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT customers.id, customers.name, customers.email, customers.image_url,
                       COUNT(invoices.id) AS total_invoices,
                       COALESCE(SUM(CASE WHEN invoices.status = 'pending' THEN invoices.amount END), 0) AS total_pending,
                       COALESCE(SUM(CASE WHEN invoices.status = 'paid' THEN invoices.amount END), 0) AS total_paid
                FROM customers
                LEFT JOIN invoices ON customers.id = invoices.customer_id
                WHERE customers.name LIKE ? OR customers.email LIKE ?
                GROUP BY customers.id, customers.name, customers.email, customers.image_url
                ORDER BY customers.name ASC
                """,
                (pattern, pattern),
            ).fetchall()
        finally:
            conn.close()
        return [
            CustomerTableRow(
                id=row["id"],
                name=row["name"],
                email=row["email"],
                image_url=row["image_url"],
                total_invoices=row["total_invoices"],
                total_pending=format_currency(row["total_pending"]),
                total_paid=format_currency(row["total_paid"]),
            )
            for row in rows
        ]

    @classmethod
    async def fetch_latest_invoices(cls, limit: int = 5) -> List[LatestInvoice]:
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT invoices.id, invoices.amount, customers.name, customers.email, customers.image_url
                FROM invoices
                JOIN customers ON invoices.customer_id = customers.id
                ORDER BY invoices.date DESC, invoices.rowid DESC
                LIMIT ?
                """,
                (limit,),
            ).fetchall()
        finally:
            conn.close()
        return [
            LatestInvoice(
                id=row["id"],
                name=row["name"],
                email=row["email"],
                image_url=row["image_url"],
                amount=format_currency(row["amount"]),
            )
            for row in rows
        ]

    @classmethod
    async def fetch_card_data(cls) -> CardData:
        """Counts and totals for the overview cards."""
        conn = get_connection()
        try:
            invoice_count = conn.execute("SELECT COUNT(*) AS count FROM invoices").fetchone()["count"]
            customer_count = conn.execute("SELECT COUNT(*) AS count FROM customers").fetchone()["count"]
            totals = conn.execute(
                """
                SELECT COALESCE(SUM(CASE WHEN status = 'paid' THEN amount END), 0) AS paid,
                       COALESCE(SUM(CASE WHEN status = 'pending' THEN amount END), 0) AS pending
                FROM invoices
                """
            ).fetchone()
        finally:
            conn.close()
        return CardData(
            number_of_invoices=invoice_count,
            number_of_customers=customer_count,
            total_paid_invoices=format_currency(totals["paid"]),
            total_pending_invoices=format_currency(totals["pending"]),
        )
