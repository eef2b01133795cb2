# core/lister.py
from __future__ import annotations
from typing import List, Optional

from core.errors import RepositoryAccessError, RepositoryError
from core.models import NodeRecord
from core.repository import Node, Session
from utils.logger import get_logger

SYSTEM_PREFIX = "/jcr:system"

log = get_logger()


def _resolve_start(session: Session, start_path: Optional[str]) -> Node:
    if start_path is None or not start_path.strip():
        return session.root_node()
    # 不做规范化：调用方需要时先用 NodePaths.to_absolute
    return session.get_node(start_path)


def _collect(node: Node, system_prefix: str, prune: bool) -> List[NodeRecord]:
    records: List[NodeRecord] = []
    for child in node.children():
        path = child.path
        is_system = path.startswith(system_prefix)
        # 先收集子树，再追加自身条目
        if child.has_children() and not (prune and is_system):
            records.extend(_collect(child, system_prefix, prune))
        if is_system:
            continue
        records.append(NodeRecord(path=path, primary_node_type=child.primary_type))
    return records


def list_descendants(session: Session, start_path: Optional[str] = "",
                     system_prefix: str = SYSTEM_PREFIX,
                     prune_system_subtree: bool = False) -> List[NodeRecord]:
    """List every node below ``start_path`` as a flat list of records.

    A blank start path means the repository root. Descendants of a child are
    emitted before the child itself; nodes whose path starts with
    ``system_prefix`` are left out. With ``prune_system_subtree`` the walk
    does not descend into such nodes at all, which only changes which reads
    are performed, not the records returned for fully qualified paths.

    Any read failure aborts the whole listing with RepositoryAccessError.
    """
    try:
        start = _resolve_start(session, start_path)
        records = _collect(start, system_prefix, prune_system_subtree)
    except RepositoryError:
        raise
    except Exception as e:
        raise RepositoryAccessError(f"listing below {start_path!r} failed: {e}") from e
    log.debug(f"list_descendants start={start_path!r} records={len(records)}")
    return records
