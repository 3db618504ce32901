from __future__ import annotations

from decimal import Decimal

import pytest

from invoice_dashboard.app.services.validation import Invalid, Valid, validate_invoice_form

CUSTOMER_ID = "3958dc9e-712f-4377-85e9-fec4b6a6442a"


def test_valid_form_is_normalized() -> None:
    result = validate_invoice_form({"customerId": CUSTOMER_ID, "amount": "12.34", "status": "paid"})

    assert isinstance(result, Valid)
    assert result.data.customer_id == CUSTOMER_ID
    assert result.data.amount == Decimal("12.34")
    assert result.data.status == "paid"


def test_id_and_date_are_ignored() -> None:
    result = validate_invoice_form(
        {"id": "nope", "date": "not-a-date", "customerId": CUSTOMER_ID, "amount": "5", "status": "pending"}
    )

    assert isinstance(result, Valid)
    assert not hasattr(result.data, "date")


def test_every_failing_field_is_reported() -> None:
    result = validate_invoice_form({})

    assert isinstance(result, Invalid)
    assert result.errors == {
        "customerId": ["Please select a customer"],
        "amount": ["Please enter an amount greater than $0"],
        "status": ["Please select an invoice status"],
    }


def test_partial_failures_report_only_offending_fields() -> None:
    result = validate_invoice_form({"customerId": CUSTOMER_ID, "amount": "-3", "status": "overdue"})

    assert isinstance(result, Invalid)
    assert set(result.errors) == {"amount", "status"}


@pytest.mark.parametrize("amount", ["0", "-1", "-0.01", "", "abc", "NaN", "Infinity", None])
def test_non_positive_or_unparseable_amount_is_rejected(amount) -> None:
    result = validate_invoice_form({"customerId": CUSTOMER_ID, "amount": amount, "status": "paid"})

    assert isinstance(result, Invalid)
    assert result.errors == {"amount": ["Please enter an amount greater than $0"]}


def test_empty_customer_is_rejected() -> None:
    result = validate_invoice_form({"customerId": "", "amount": "1", "status": "paid"})

    assert isinstance(result, Invalid)
    assert result.errors == {"customerId": ["Please select a customer"]}


@pytest.mark.parametrize("amount", ["0.001", "12.345", "1e30", "99999999999999999999"])
def test_sub_cent_or_oversized_amount_is_rejected(amount) -> None:
    result = validate_invoice_form({"customerId": CUSTOMER_ID, "amount": amount, "status": "paid"})

    assert isinstance(result, Invalid)
    assert result.errors == {"amount": ["Please enter an amount greater than $0"]}


def test_largest_accepted_amount() -> None:
    result = validate_invoice_form({"customerId": CUSTOMER_ID, "amount": "999999999999999.99", "status": "paid"})

    assert isinstance(result, Valid)
    assert result.data.amount == Decimal("999999999999999.99")
