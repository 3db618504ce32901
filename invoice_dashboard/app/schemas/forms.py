"""
Outcomes returned by form actions.

A mutation either hands the form back with messages to display
(``FormState``) or tells the caller where to navigate next
(``Redirect``).  Redirect is a plain value; the HTTP layer turns it
into a ``303 See Other`` response.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


class FormState(BaseModel):
    """State handed back to a form after a failed submission."""

    errors: Dict[str, List[str]] = Field(default_factory=dict, example={"amount": ["Please enter an amount greater than $0"]})
    message: Optional[str] = Field(None, example="Missing fields. Failed to create invoice.")


@dataclass(frozen=True)
class Redirect:
    """Navigate to ``path`` once the mutation has been applied."""

    path: str


ActionOutcome = Union[FormState, Redirect]
