# utils/tree_parser.py
from __future__ import annotations
import json
from pathlib import Path
from typing import Dict, Any
import yaml
from core.models import RepoNode
from core.schemas import validate_tree

def _node(d: Dict[str, Any]) -> RepoNode:
    return RepoNode(name=d["name"], primary_type=d.get("primaryType", "nt:unstructured"),
                    children=[_node(c) for c in d.get("children", [])])

def parse_tree(tree_json: Dict[str, Any]) -> RepoNode:
    validate_tree(tree_json)
    return _node(tree_json)

def load_tree_file(path: str) -> RepoNode:
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    return parse_tree(data or {"name": ""})
