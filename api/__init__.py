"""
Demo API for the storefront.

This package provides a single FastAPI application that exposes:
- Catalog browsing endpoints
- A checkout endpoint that runs the cart -> order -> notification flow
"""

from api.main import app

__all__ = ["app"]
