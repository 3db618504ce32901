"""
Top‑level package for the Invoice Dashboard.

This file makes ``invoice_dashboard`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``invoice_dashboard.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
