"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .auth_handler import AuthHandler
from .list_handler import ListHandler, compute_etag, etag_matches

__all__ = [
    "AuthHandler",
    "ListHandler",
    "compute_etag",
    "etag_matches",
]
