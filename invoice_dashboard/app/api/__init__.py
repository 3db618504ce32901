"""
HTTP layer of the dashboard.

``router`` aggregates the endpoint modules under ``endpoints``; each
module defines an ``APIRouter`` for one page of the dashboard.
"""
