# orchestrator/listing.py
from __future__ import annotations
from typing import Dict, List, Optional
from core.lister import list_descendants
from core.models import Identity
from core.session import open_session
from utils.logger import get_logger, StageTimer

log = get_logger()

def get_repository_nodes(identity: Identity, start_path: Optional[str], ctx) -> List[Dict[str, str]]:
    """List ``{path, primaryNodeType}`` rows below ``start_path`` in a fresh session.

    The session is logged out before returning, whether the listing
    succeeded or raised.
    """
    repo_cfg = ctx.cfg.repository
    with StageTimer(log, f"list_nodes start={start_path or repo_cfg.root_path!r}"):
        with open_session(ctx.provider, identity, ctx) as session:
            records = list_descendants(session, start_path,
                                       system_prefix=repo_cfg.system_prefix,
                                       prune_system_subtree=repo_cfg.prune_system_subtree)
    return [r.to_dict() for r in records]
