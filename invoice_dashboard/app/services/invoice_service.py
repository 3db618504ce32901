"""
Business logic for invoice mutations.

Every mutation follows the same steps: validate the submitted form,
derive the stored values, run one parameterised statement, invalidate
the cached invoice list and tell the caller to navigate back to it.
Validation and storage failures on create/update are handed back to
the form as a ``FormState``; a failed delete has no form to report to
and is raised instead.
"""

import logging
import sqlite3
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from ..core.cache import ViewCache, view_cache
from ..core.db import get_connection
from ..schemas.forms import ActionOutcome, FormState, Redirect
from ..utils import to_cents
from .validation import Invalid, validate_invoice_form


logger = logging.getLogger(__name__)

INVOICES_PATH = "/dashboard/invoices"


class InvoiceDeleteError(RuntimeError):
    """Raised when an invoice could not be deleted."""


def utc_today() -> str:
    """Current UTC calendar date as ``YYYY-MM-DD``."""
    return datetime.now(timezone.utc).date().isoformat()


class InvoiceActions:
    """Create, update and delete invoices.

    Collaborators are injected so tests can replace the database, the
    view cache or the clock.

    Parameters
    ----------
    connect : Callable[[], sqlite3.Connection]
        Factory returning a fresh database connection.
    cache : ViewCache
        Cache whose ``/dashboard/invoices`` entries are dropped after a
        successful write.
    today : Callable[[], str]
        Returns the issue date stamped on new invoices.
    """

    def __init__(
        self,
        connect: Callable[[], sqlite3.Connection] = get_connection,
        cache: ViewCache = view_cache,
        today: Callable[[], str] = utc_today,
    ) -> None:
        self.connect = connect
        self.cache = cache
        self.today = today

    async def create_invoice(self, form: Mapping[str, Any]) -> ActionOutcome:
        """Validate ``form`` and insert a new invoice dated today."""
        result = validate_invoice_form(form)
        if isinstance(result, Invalid):
            logger.debug("Rejected invoice form: %s", result.errors)
            return FormState(
                errors=result.errors,
                message="Missing fields. Failed to create invoice.",
            )

        data = result.data
        amount_in_cents = to_cents(data.amount)
        date = self.today()

        try:
            conn = self.connect()
            try:
                rows = conn.execute(
                    """
                    INSERT INTO invoices (customer_id, amount, status, date)
                    VALUES (?, ?, ?, ?)
                    RETURNING id
                    """,
                    (data.customer_id, amount_in_cents, data.status, date),
                ).fetchall()
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error("Failed to create invoice: %s", e)
            return FormState(message="Database error: Failed to create invoice.")

        logger.info("Created invoice %s for customer %s", rows[0]["id"], data.customer_id)
        self.cache.invalidate(INVOICES_PATH)
        return Redirect(INVOICES_PATH)

    async def update_invoice(self, invoice_id: str, form: Mapping[str, Any]) -> ActionOutcome:
        """Validate ``form`` and overwrite customer, amount and status.

        The identifier comes from the route, not the form, and the
        issue date is left untouched.
        """
        result = validate_invoice_form(form)
        if isinstance(result, Invalid):
            logger.debug("Rejected invoice form for %s: %s", invoice_id, result.errors)
            return FormState(
                errors=result.errors,
                message="Missing fields. Failed to update invoice.",
            )

        data = result.data
        amount_in_cents = to_cents(data.amount)

        try:
            conn = self.connect()
            try:
                conn.execute(
                    """
                    UPDATE invoices
                    SET customer_id = ?, amount = ?, status = ?
                    WHERE id = ?
                    """,
                    (data.customer_id, amount_in_cents, data.status, invoice_id),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error("Failed to update invoice %s: %s", invoice_id, e)
            return FormState(message="Database error: Failed to update invoice.")

        logger.info("Updated invoice %s", invoice_id)
        self.cache.invalidate(INVOICES_PATH)
        return Redirect(INVOICES_PATH)

    async def delete_invoice(self, invoice_id: str) -> None:
        """Delete an invoice.

        Raises
        ------
        InvoiceDeleteError
            If the statement fails.  The storage error is logged and
            chained.
        """
        try:
            conn = self.connect()
            try:
                conn.execute("DELETE FROM invoices WHERE id = ?", (invoice_id,))
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error("Failed to delete invoice %s: %s", invoice_id, e)
            raise InvoiceDeleteError("Database error: Failed to delete invoice.") from e

        logger.info("Deleted invoice %s", invoice_id)
        self.cache.invalidate(INVOICES_PATH)
