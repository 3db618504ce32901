"""
Endpoint modules.

Each module defines an APIRouter for one area of the dashboard (login,
overview, invoices, customers).  The routers are aggregated in
``api/router.py`` and included in the main application.
"""
