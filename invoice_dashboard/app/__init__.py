"""
Application package initializer.

The dashboard is organised into logical pieces: ``core`` holds
configuration, storage, caching and authentication primitives,
``schemas`` the pydantic models, ``services`` the business logic and
``api`` the routers that expose it over HTTP.
"""

from .main import app  # noqa: F401
