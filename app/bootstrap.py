# app/bootstrap.py
from core.paths import NodePaths
from core.models import RepoNode
from orchestrator.context import Context
from repository_adapters.git_repository import GitSessionProvider
from repository_adapters.memory_repository import MemorySessionProvider
from utils.logger import get_logger
from utils.properties import PropertiesLookup
from utils.tree_parser import load_tree_file

def build_provider(cfg):
    root_path = cfg.repository.root_path
    if cfg.backend.kind == "git":
        if not cfg.backend.location:
            raise ValueError("backend.location is required for the git backend")
        return GitSessionProvider(cfg.backend.location, revision=cfg.backend.revision, root_path=root_path)
    # memory：未给出种子树时只有根节点
    root = load_tree_file(cfg.backend.location) if cfg.backend.location else RepoNode(name="", primary_type="rep:root")
    return MemorySessionProvider(root, root_path=root_path)

def bootstrap(cfg):
    get_logger(level=cfg.logging.level)
    return Context(cfg=cfg, provider=build_provider(cfg),
                   paths=NodePaths(root_path=cfg.repository.root_path),
                   properties=PropertiesLookup(cfg.properties))
