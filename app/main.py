# app/main.py
from __future__ import annotations
import argparse
import json
import sys
from app.config import load_config
from app.bootstrap import bootstrap
from core.errors import RepositoryError
from core.models import Identity
from core.schemas import validate_node_records
from orchestrator.listing import get_repository_nodes
from utils.logger import get_logger
from utils.properties import determine_default_language

def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="repo-nodes", description="List nodes of a content repository")
    p.add_argument("--config", help="YAML config file (default: $REPO_NODES_CONFIG)")
    p.add_argument("--user", default="admin", help="user login id to open the session with")
    sub = p.add_subparsers(dest="command", required=True)
    ls = sub.add_parser("list", help="list all nodes below a path")
    ls.add_argument("start_path", nargs="?", default="")
    ls.add_argument("--absolute", action="store_true", help="turn a relative start path into an absolute one first")
    ls.add_argument("--json", action="store_true", help="print a JSON array instead of tab separated lines")
    sub.add_parser("default-language", help="print the fallback locale")
    return p

def main(argv=None) -> int:
    args = _parser().parse_args(argv)
    cfg = load_config(args.config)
    ctx = bootstrap(cfg)
    if args.command == "default-language":
        print(determine_default_language(ctx.properties) or "")
        return 0
    start_path = ctx.paths.to_absolute(args.start_path) if args.absolute else args.start_path
    try:
        rows = get_repository_nodes(Identity(args.user), start_path, ctx)
    except RepositoryError as e:
        get_logger().error(f"listing failed: {e}")
        return 1
    if args.json:
        validate_node_records(rows)
        print(json.dumps(rows, ensure_ascii=False, indent=2))
    else:
        for r in rows:
            print(f"{r['path']}\t{r['primaryNodeType']}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
