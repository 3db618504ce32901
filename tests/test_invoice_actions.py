from __future__ import annotations

import asyncio
import sqlite3

import pytest

from invoice_dashboard.app.core.db import get_connection
from invoice_dashboard.app.schemas.forms import FormState, Redirect
from invoice_dashboard.app.services.invoice_service import (
    INVOICES_PATH,
    InvoiceActions,
    InvoiceDeleteError,
    utc_today,
)

CUSTOMER_ID = "cc27c14a-0acf-4f4a-a6c9-d45682c144b9"  # Amy Burns
OTHER_CUSTOMER_ID = "13d07535-c59e-4157-a011-f8d2ef4e0cbb"  # Balazs Orban


def _invoices() -> list[dict]:
    conn = get_connection()
    try:
        rows = conn.execute("SELECT id, customer_id, amount, status, date FROM invoices").fetchall()
    finally:
        conn.close()
    return [dict(row) for row in rows]


def _broken_connection() -> sqlite3.Connection:
    raise sqlite3.OperationalError("database is locked")


def _actions(cache) -> InvoiceActions:
    return InvoiceActions(cache=cache, today=lambda: "2024-01-31")


def test_create_inserts_one_row_then_invalidates(database, recording_cache) -> None:
    before = _invoices()

    outcome = asyncio.run(
        _actions(recording_cache).create_invoice({"customerId": CUSTOMER_ID, "amount": "12.34", "status": "pending"})
    )

    assert outcome == Redirect(INVOICES_PATH)
    after = _invoices()
    assert len(after) == len(before) + 1
    created = [row for row in after if row not in before][0]
    assert created["customer_id"] == CUSTOMER_ID
    assert created["amount"] == 1234
    assert created["status"] == "pending"
    assert created["date"] == "2024-01-31"
    assert created["id"]
    # The row is already stored when the list view is invalidated.
    assert recording_cache.invalidated == [INVOICES_PATH]
    assert recording_cache.invoice_counts == [len(before) + 1]


def test_create_stamps_utc_date_by_default(database, recording_cache) -> None:
    outcome = asyncio.run(
        InvoiceActions(cache=recording_cache).create_invoice(
            {"customerId": CUSTOMER_ID, "amount": "1", "status": "paid"}
        )
    )

    assert isinstance(outcome, Redirect)
    assert utc_today() in {row["date"] for row in _invoices()}


def test_create_with_invalid_form_writes_nothing(database, recording_cache) -> None:
    before = _invoices()

    outcome = asyncio.run(_actions(recording_cache).create_invoice({"amount": "0", "status": "unknown"}))

    assert isinstance(outcome, FormState)
    assert outcome.message == "Missing fields. Failed to create invoice."
    assert set(outcome.errors) == {"customerId", "amount", "status"}
    assert _invoices() == before
    assert recording_cache.invalidated == []


@pytest.mark.parametrize("amount", ["0.001", "1e30", "99999999999999999999"])
def test_create_with_unstorable_amount_is_a_field_error(database, recording_cache, amount) -> None:
    before = _invoices()

    outcome = asyncio.run(
        _actions(recording_cache).create_invoice({"customerId": CUSTOMER_ID, "amount": amount, "status": "paid"})
    )

    assert outcome == FormState(
        errors={"amount": ["Please enter an amount greater than $0"]},
        message="Missing fields. Failed to create invoice.",
    )
    assert _invoices() == before
    assert recording_cache.invalidated == []


def test_create_largest_amount_is_stored(database, recording_cache) -> None:
    outcome = asyncio.run(
        _actions(recording_cache).create_invoice(
            {"customerId": CUSTOMER_ID, "amount": "999999999999999.99", "status": "paid"}
        )
    )

    assert outcome == Redirect(INVOICES_PATH)
    assert 99999999999999999 in {row["amount"] for row in _invoices()}


def test_create_storage_failure_returns_generic_message(database, recording_cache) -> None:
    actions = InvoiceActions(connect=_broken_connection, cache=recording_cache)

    outcome = asyncio.run(actions.create_invoice({"customerId": CUSTOMER_ID, "amount": "10", "status": "paid"}))

    assert outcome == FormState(message="Database error: Failed to create invoice.")
    assert "locked" not in outcome.message
    assert recording_cache.invalidated == []


def test_create_for_unknown_customer_is_rejected_by_storage(database, recording_cache) -> None:
    before = _invoices()

    outcome = asyncio.run(
        _actions(recording_cache).create_invoice({"customerId": "no-such-customer", "amount": "10", "status": "paid"})
    )

    assert outcome == FormState(message="Database error: Failed to create invoice.")
    assert _invoices() == before
    assert recording_cache.invalidated == []


def test_update_keeps_id_and_date(database, recording_cache) -> None:
    outcome = asyncio.run(
        _actions(recording_cache).update_invoice(
            "inv-0001", {"customerId": OTHER_CUSTOMER_ID, "amount": "99.99", "status": "paid"}
        )
    )

    assert outcome == Redirect(INVOICES_PATH)
    updated = {row["id"]: row for row in _invoices()}["inv-0001"]
    assert updated == {
        "id": "inv-0001",
        "customer_id": OTHER_CUSTOMER_ID,
        "amount": 9999,
        "status": "paid",
        "date": "2022-12-06",
    }
    assert recording_cache.invalidated == [INVOICES_PATH]


def test_update_with_invalid_form(database, recording_cache) -> None:
    before = _invoices()

    outcome = asyncio.run(
        _actions(recording_cache).update_invoice("inv-0001", {"customerId": CUSTOMER_ID, "amount": "-1", "status": "paid"})
    )

    assert outcome.message == "Missing fields. Failed to update invoice."
    assert outcome.errors == {"amount": ["Please enter an amount greater than $0"]}
    assert _invoices() == before
    assert recording_cache.invalidated == []


@pytest.mark.parametrize("amount", ["0.001", "1e30", "99999999999999999999"])
def test_update_with_unstorable_amount_is_a_field_error(database, recording_cache, amount) -> None:
    before = _invoices()

    outcome = asyncio.run(
        _actions(recording_cache).update_invoice("inv-0001", {"customerId": CUSTOMER_ID, "amount": amount, "status": "paid"})
    )

    assert outcome.errors == {"amount": ["Please enter an amount greater than $0"]}
    assert outcome.message == "Missing fields. Failed to update invoice."
    assert _invoices() == before
    assert recording_cache.invalidated == []


def test_update_storage_failure_reports_update(database, recording_cache) -> None:
    actions = InvoiceActions(connect=_broken_connection, cache=recording_cache)

    outcome = asyncio.run(
        actions.update_invoice("inv-0001", {"customerId": CUSTOMER_ID, "amount": "10", "status": "paid"})
    )

    assert outcome == FormState(message="Database error: Failed to update invoice.")
    assert recording_cache.invalidated == []


def test_delete_removes_invoice(database, recording_cache) -> None:
    asyncio.run(_actions(recording_cache).delete_invoice("inv-0002"))

    assert "inv-0002" not in {row["id"] for row in _invoices()}
    assert recording_cache.invalidated == [INVOICES_PATH]


def test_delete_failure_is_raised(database, recording_cache) -> None:
    actions = InvoiceActions(connect=_broken_connection, cache=recording_cache)

    with pytest.raises(InvoiceDeleteError, match="Failed to delete invoice") as exc_info:
        asyncio.run(actions.delete_invoice("inv-0002"))

    assert isinstance(exc_info.value.__cause__, sqlite3.OperationalError)
    assert recording_cache.invalidated == []
