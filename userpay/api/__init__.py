"""
API layer for the userpay service.

Exposes the ``/users`` and ``/payments`` HTTP endpoints and the
application-wide exception handlers.
"""
