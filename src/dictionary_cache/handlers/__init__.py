"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .word_handler import WordHandler, to_http_exception

__all__ = [
    "WordHandler",
    "to_http_exception",
]
