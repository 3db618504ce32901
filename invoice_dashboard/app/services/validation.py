"""
Validation of raw invoice form submissions.

A submission is a mapping of form field names to strings, exactly as
posted by the browser.  ``validate_invoice_form`` parses it with the
``InvoiceForm`` schema and returns either ``Valid`` with the parsed
form or ``Invalid`` with one message per failing field.  All failing
fields are reported together.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

from pydantic import ValidationError

from ..schemas.invoice import InvoiceForm


# Message shown under each form field when its value is rejected,
# whatever the reason (missing, wrong type, out of range).
FIELD_MESSAGES: Dict[str, str] = {
    "customerId": "Please select a customer",
    "amount": "Please enter an amount greater than $0",
    "status": "Please select an invoice status",
}

FORM_FIELDS = tuple(FIELD_MESSAGES)


@dataclass(frozen=True)
class Valid:
    data: InvoiceForm


@dataclass(frozen=True)
class Invalid:
    errors: Dict[str, List[str]] = field(default_factory=dict)


ValidationResult = Union[Valid, Invalid]


def validate_invoice_form(raw: Mapping[str, Any]) -> ValidationResult:
    """Validate a create/edit submission.

    Only the form fields are read; anything else in ``raw`` (including
    ``id`` or ``date``) is ignored.  Absent fields are treated like the
    browser's ``FormData.get`` would report them, as ``None``.
    """
    values = {name: raw.get(name) for name in FORM_FIELDS}
    try:
        form = InvoiceForm.model_validate(values)
    except ValidationError as exc:
        errors: Dict[str, List[str]] = {}
        for error in exc.errors():
            name = str(error["loc"][0]) if error["loc"] else ""
            message = FIELD_MESSAGES.get(name, error["msg"])
            messages = errors.setdefault(name, [])
            if message not in messages:
                messages.append(message)
        return Invalid(errors=errors)
    return Valid(data=form)
