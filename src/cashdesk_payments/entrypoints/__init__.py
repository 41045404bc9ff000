"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- API: HTTP endpoints (FastAPI routes)

Entrypoints translate external requests into service calls
and map service results to the delivery mechanism.
"""
