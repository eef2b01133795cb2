# core/models.py
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class Identity:
    user_login_id: str


@dataclass(frozen=True)
class NodeRecord:
    path: str
    primary_node_type: str

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "primaryNodeType": self.primary_node_type}


@dataclass
class RepoNode:
    name: str
    primary_type: str = "nt:unstructured"
    children: List["RepoNode"] = field(default_factory=list)
