# core/schemas.py
from __future__ import annotations
from typing import Dict, Any, List
import jsonschema

# 内存仓库种子树 Schema
REPOSITORY_TREE_SCHEMA: Dict[str, Any] = {
  "$ref": "#/$defs/RepoNode",
  "$defs": {
    "RepoNode": {
      "type": "object",
      "required": ["name"],
      "properties": {
        "name": {
          "type": "string",
          "pattern": r"^[^/]*$"  # 名称中不允许出现 /
        },
        "primaryType": {"type": "string", "minLength": 1},
        "children": {
          "type": "array",
          "items": {"$ref": "#/$defs/RepoNode"},
          "default": []
        }
      },
      "additionalProperties": False
    }
  }
}

NODE_RECORDS_SCHEMA: Dict[str, Any] = {
  "type": "array",
  "items": {
    "type": "object",
    "required": ["path", "primaryNodeType"],
    "properties": {
      "path": {"type": "string", "minLength": 1},
      "primaryNodeType": {"type": "string"}
    },
    "additionalProperties": False
  }
}


def validate_tree_structure(tree_json: Dict[str, Any]) -> None:
    jsonschema.validate(tree_json, REPOSITORY_TREE_SCHEMA)


def validate_tree_semantics(tree_json: Dict[str, Any]) -> None:
    def walk(n, path):
        seen = set()
        for c in n.get("children", []):
            name = c["name"]
            child_path = f"{path.rstrip('/')}/{name}"
            if not name:
                raise ValueError(f"empty node name below {path}")
            if name in seen:
                raise ValueError(f"duplicate sibling name: {child_path}")
            seen.add(name)
            walk(c, child_path)
    walk(tree_json, "/")


def validate_tree(tree_json: Dict[str, Any]) -> None:
    validate_tree_structure(tree_json)
    validate_tree_semantics(tree_json)


def validate_node_records(records: List[Dict[str, str]]) -> None:
    jsonschema.validate(records, NODE_RECORDS_SCHEMA)
