# core/repository.py
"""
Capabilities the lister needs from a hierarchical content repository.

Concrete bindings live in ``repository_adapters``; everything in ``core``
is written against these protocols only.
"""
from __future__ import annotations
from typing import Any, Iterable, Protocol

from core.models import Identity


class Node(Protocol):
    @property
    def path(self) -> str: ...

    @property
    def primary_type(self) -> str: ...

    def has_children(self) -> bool: ...

    def children(self) -> Iterable["Node"]:
        """Direct children in the repository's native order."""
        ...


class Session(Protocol):
    def root_node(self) -> Node: ...

    def get_node(self, path: str) -> Node:
        """Exact lookup; raises RepositoryAccessError if nothing lives at ``path``."""
        ...

    def is_live(self) -> bool: ...

    def logout(self) -> None: ...


class SessionProvider(Protocol):
    def open(self, identity: Identity, context: Any) -> Session: ...
