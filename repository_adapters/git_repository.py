# repository_adapters/git_repository.py
"""
Expose the tree of one git commit as a read-only node repository.

Trees, blobs and submodule entries become nodes; a node's path is the
configured root path followed by its repo-relative path, and its primary
type is the git object type (``tree``, ``blob`` or ``submodule``).
"""
from __future__ import annotations
from typing import Any, Iterable, List, Optional
from git import Repo
from git.exc import BadName, GitError, InvalidGitRepositoryError, NoSuchPathError
from git.objects import Tree

from core.errors import AuthenticationError, RepositoryAccessError, RepositoryConnectionError
from core.models import Identity
from core.paths import ROOT_PATH, join_node_path


class GitNode:
    def __init__(self, session: "GitSession", obj, path: str):
        self._session = session
        self._obj = obj
        self._path = path

    @property
    def path(self) -> str:
        self._session._ensure_live()
        return self._path

    @property
    def primary_type(self) -> str:
        self._session._ensure_live()
        return self._obj.type

    def has_children(self) -> bool:
        self._session._ensure_live()
        if not isinstance(self._obj, Tree):
            return False
        try:
            return len(self._obj) > 0
        except (GitError, ValueError, OSError) as e:
            raise RepositoryAccessError(f"cannot read children of {self._path}: {e}") from e

    def children(self) -> Iterable["GitNode"]:
        self._session._ensure_live()
        if not isinstance(self._obj, Tree):
            return []
        try:
            # 保持 git 树对象的原生顺序
            return [GitNode(self._session, o, join_node_path(self._session.root_path, o.path)) for o in self._obj]
        except (GitError, ValueError, OSError) as e:
            raise RepositoryAccessError(f"cannot read children of {self._path}: {e}") from e

    def __repr__(self) -> str:
        return f"GitNode({self._path!r}, {self._obj.type!r})"


class GitSession:
    def __init__(self, repo: Repo, tree: Tree, root_path: str, user_login_id: str):
        self.repo = repo
        self.tree = tree
        self.root_path = root_path
        self.user_login_id = user_login_id
        self._live = True

    def _ensure_live(self):
        if not self._live:
            raise RepositoryAccessError("session is closed")

    def root_node(self) -> GitNode:
        self._ensure_live()
        return GitNode(self, self.tree, self.root_path)

    def get_node(self, path: str) -> GitNode:
        self._ensure_live()
        if path == self.root_path:
            return self.root_node()
        if not path.startswith(self.root_path):
            raise RepositoryAccessError(f"not an absolute path: {path!r}")
        rel = path[len(self.root_path):]
        if not self.root_path.endswith("/"):
            rel = rel[1:] if rel.startswith("/") else ""
        if not rel or "" in rel.split("/"):
            raise RepositoryAccessError(f"path not found: {path!r}")
        try:
            obj = self.tree / rel
        except KeyError as e:
            raise RepositoryAccessError(f"path not found: {path!r}") from e
        except (GitError, ValueError, OSError) as e:
            raise RepositoryAccessError(f"cannot read {path!r}: {e}") from e
        return GitNode(self, obj, path)

    def is_live(self) -> bool:
        return self._live

    def logout(self) -> None:
        self._live = False
        self.repo.close()


class GitSessionProvider:
    def __init__(self, location: str, revision: str = "HEAD", root_path: str = ROOT_PATH,
                 users: Optional[List[str]] = None):
        self.location = location
        self.revision = revision
        self.root_path = root_path
        self.users = set(users) if users is not None else None

    def open(self, identity: Identity, context: Any = None) -> GitSession:
        user = identity.user_login_id if identity else ""
        if not user:
            raise AuthenticationError("no user login given")
        if self.users is not None and user not in self.users:
            raise AuthenticationError(f"unknown user: {user}")
        try:
            repo = Repo(self.location)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise RepositoryConnectionError(f"no git repository at {self.location}") from e
        try:
            commit = repo.commit(self.revision)
        except (BadName, ValueError, GitError) as e:
            repo.close()
            raise RepositoryConnectionError(f"cannot resolve revision {self.revision!r} in {self.location}") from e
        return GitSession(repo, commit.tree, self.root_path, user)
