# core/errors.py
from __future__ import annotations


class RepositoryError(Exception):
    """Base class for failures talking to the content repository."""


class RepositoryAccessError(RepositoryError):
    """Raised when a node, its path, type or children cannot be read."""


class AuthenticationError(RepositoryError):
    """Raised when the session provider rejects the caller identity."""


class RepositoryConnectionError(RepositoryError):
    """Raised when no session can be opened against the repository."""
