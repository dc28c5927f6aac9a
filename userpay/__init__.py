"""
User/Payment service root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic and infrastructure (MongoDB repositories, in-memory stores and
the adapters behind the external user port).
"""
