"""Product catalog HTTP service.

This package contains a small CRUD service for products backed by SQLite,
with soft-delete semantics and a uniform JSON response envelope.
"""

__version__ = "0.1.0"
