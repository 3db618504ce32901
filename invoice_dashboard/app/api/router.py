"""
Top‑level router of the dashboard.

Aggregates the area routers under their URL prefixes.  Everything
below ``/dashboard`` requires a signed‑in session; the login routes
live at the root.
"""

from fastapi import APIRouter

from .endpoints import auth, customers, invoices, overview


router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(overview.router, prefix="/dashboard", tags=["overview"])
router.include_router(invoices.router, prefix="/dashboard/invoices", tags=["invoices"])
router.include_router(customers.router, prefix="/dashboard/customers", tags=["customers"])
