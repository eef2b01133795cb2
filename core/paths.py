# core/paths.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from core.errors import RepositoryAccessError, RepositoryError
from core.repository import Node

ROOT_PATH = "/"


@dataclass(frozen=True)
class NodePaths:
    """Path helpers bound to one configured repository root path."""
    root_path: str = ROOT_PATH

    def to_absolute(self, node_path: str | None) -> str:
        if node_path is None or not node_path.strip():
            return self.root_path
        if self.is_absolute(node_path):
            return node_path
        # 简单拼接，不去重分隔符
        return self.root_path + node_path

    def is_absolute(self, node_path: str) -> bool:
        return node_path.startswith(self.root_path)

    def is_root(self, target: Union[str, Node]) -> bool:
        if isinstance(target, str):
            return target == self.root_path
        try:
            node_path = target.path
        except RepositoryError:
            raise
        except Exception as e:
            raise RepositoryAccessError(f"cannot read node path: {e}") from e
        return node_path == self.root_path

    def is_not_root(self, target: Union[str, Node]) -> bool:
        return not self.is_root(target)


def join_node_path(parent_path: str, name: str) -> str:
    if parent_path.endswith("/"):
        return parent_path + name
    return f"{parent_path}/{name}"
