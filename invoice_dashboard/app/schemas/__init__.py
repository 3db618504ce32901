"""
Pydantic schema definitions for the dashboard.

Each domain (invoices, customers, users) defines its own models for
form input and for the rows rendered by the dashboard views.  Schemas
are separated from storage so the SQL layout can change without
touching the HTTP surface.
"""
