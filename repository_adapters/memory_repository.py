# repository_adapters/memory_repository.py
from __future__ import annotations
from typing import Any, Iterable, List, Optional, Set

from core.errors import AuthenticationError, RepositoryAccessError
from core.models import Identity, RepoNode
from core.paths import ROOT_PATH, join_node_path


class MemoryNode:
    def __init__(self, session: "MemorySession", seed: RepoNode, path: str):
        self._session = session
        self._seed = seed
        self._path = path

    @property
    def path(self) -> str:
        self._session._ensure_live()
        return self._path

    @property
    def primary_type(self) -> str:
        self._session._ensure_live()
        return self._seed.primary_type

    def has_children(self) -> bool:
        self._session._ensure_live()
        return bool(self._seed.children)

    def children(self) -> Iterable["MemoryNode"]:
        self._session._ensure_live()
        return [MemoryNode(self._session, c, join_node_path(self._path, c.name)) for c in self._seed.children]

    def __repr__(self) -> str:
        return f"MemoryNode({self._path!r}, {self._seed.primary_type!r})"


class MemorySession:
    def __init__(self, root: RepoNode, root_path: str, user_login_id: str):
        self._root = root
        self.root_path = root_path
        self.user_login_id = user_login_id
        self._live = True
        self.logout_count = 0

    def _ensure_live(self):
        if not self._live:
            raise RepositoryAccessError("session is closed")

    def root_node(self) -> MemoryNode:
        self._ensure_live()
        return MemoryNode(self, self._root, self.root_path)

    def get_node(self, path: str) -> MemoryNode:
        self._ensure_live()
        if path == self.root_path:
            return self.root_node()
        if not path.startswith(self.root_path):
            raise RepositoryAccessError(f"not an absolute path: {path!r}")
        rel = path[len(self.root_path):]
        if not self.root_path.endswith("/"):
            if not rel.startswith("/"):
                raise RepositoryAccessError(f"path not found: {path!r}")
            rel = rel[1:]
        node = self._root
        for seg in rel.split("/"):
            match = next((c for c in node.children if seg and c.name == seg), None)
            if match is None:
                raise RepositoryAccessError(f"path not found: {path!r}")
            node = match
        return MemoryNode(self, node, path)

    def is_live(self) -> bool:
        return self._live

    def logout(self) -> None:
        self._live = False
        self.logout_count += 1


class MemorySessionProvider:
    """Serves sessions over a fixed in-memory node tree."""

    def __init__(self, root: RepoNode, users: Optional[Set[str]] = None, root_path: str = ROOT_PATH):
        self.root = root
        self.users = set(users) if users is not None else None
        self.root_path = root_path
        self.sessions: List[MemorySession] = []

    def open(self, identity: Identity, context: Any = None) -> MemorySession:
        user = identity.user_login_id if identity else ""
        if not user:
            raise AuthenticationError("no user login given")
        if self.users is not None and user not in self.users:
            raise AuthenticationError(f"unknown user: {user}")
        session = MemorySession(self.root, self.root_path, user)
        self.sessions.append(session)
        return session
