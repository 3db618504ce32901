"""Invoice dashboard HTTP client.

This module defines a small client around the dashboard's HTTP
surface.  It uses the ``requests`` library internally and keeps the
session cookie set by ``POST /login`` in its ``requests.Session``, so
calls made after :meth:`DashboardClient.login` are authenticated.
Alternatively a token can be supplied up front and is then sent as an
``Authorization: Bearer`` header.

The client exposes one method per dashboard operation:

* :meth:`login` – sign in with email and password.
* :meth:`list_invoices` – one page of the invoice table.
* :meth:`create_invoice` / :meth:`update_invoice` – submit the invoice form.
* :meth:`delete_invoice` – delete an invoice.
* :meth:`list_customers` – the customers table.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with ``status_code`` and ``message`` (plus ``errors`` when
the server rejected individual form fields).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class DashboardClient:
    """Client for the invoice dashboard."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the dashboard, e.g. ``http://localhost:8000``.
            token: Optional session token sent as a bearer token.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        form: Dict[str, Any] | None = None,
    ) -> Result:
        """Perform an HTTP request to the dashboard.

        Redirects are not followed: a ``303`` answer to a form
        submission is the success signal and is returned as
        ``{"redirect": <location>}``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                data=form,
                headers=headers,
                timeout=self.timeout,
                allow_redirects=False,
            )
            if response.is_redirect:
                return {"redirect": response.headers.get("location")}, None
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._error_from_response(exc.response, exc)
        except requests.RequestException as exc:
            logger.error("Dashboard request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_from_response(response: Optional[requests.Response], exc: Exception) -> Dict[str, Any]:
        error: Dict[str, Any] = {"status_code": None, "message": ""}
        if response is not None:
            error["status_code"] = response.status_code
            try:
                body = response.json()
            except ValueError:
                error["message"] = response.text
            else:
                if isinstance(body, dict):
                    error["message"] = body.get("message") or body.get("detail") or str(body)
                    if body.get("errors"):
                        error["errors"] = body["errors"]
                else:
                    error["message"] = str(body)
        if not error["message"]:
            error["message"] = str(exc)
        logger.error("Dashboard request failed (%s): %s", error["status_code"], error["message"])
        return error

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def login(self, email: str, password: str) -> Result:
        """Sign in.  The session cookie is kept for subsequent calls."""
        return self._request("POST", "/login", form={"email": email, "password": password})

    def list_invoices(self, query: str = "", page: int = 1) -> Result:
        params: Dict[str, Any] = {"page": page}
        if query:
            params["query"] = query
        return self._request("GET", "/dashboard/invoices", params=params)

    def create_invoice(self, customer_id: str, amount: str, status: str) -> Result:
        return self._request(
            "POST",
            "/dashboard/invoices/create",
            form={"customerId": customer_id, "amount": amount, "status": status},
        )

    def update_invoice(self, invoice_id: str, customer_id: str, amount: str, status: str) -> Result:
        return self._request(
            "POST",
            f"/dashboard/invoices/{invoice_id}/edit",
            form={"customerId": customer_id, "amount": amount, "status": status},
        )

    def delete_invoice(self, invoice_id: str) -> Tuple[bool, Optional[Dict[str, Any]]]:
        _, error = self._request("POST", f"/dashboard/invoices/{invoice_id}/delete")
        return error is None, error

    def list_customers(self, query: str = "") -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/dashboard/customers", params={"query": query} if query else None)
        if error:
            return [], error
        return data or [], None
