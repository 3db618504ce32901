"""
Service layer.

Each service encapsulates business logic for a domain: validating and
applying invoice mutations, signing users in, reading the dashboard
views and reflecting the search box into the URL.
"""
