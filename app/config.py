# app/config.py
from __future__ import annotations
import os
from pathlib import Path
from typing import Dict, Literal, Optional
import yaml
from pydantic import BaseModel, ConfigDict

CONFIG_ENV_VAR = "REPO_NODES_CONFIG"

class RepositoryConfig(BaseModel):
    model_config = ConfigDict(frozen=True)
    root_path: str = "/"
    system_prefix: str = "/jcr:system"
    prune_system_subtree: bool = False

class BackendConfig(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["memory", "git"] = "memory"
    location: Optional[str] = None   # memory: 种子树文件；git: 仓库目录
    revision: str = "HEAD"

class LoggingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)
    level: str = "INFO"

class SystemConfig(BaseModel):
    model_config = ConfigDict(frozen=True)
    repository: RepositoryConfig = RepositoryConfig()
    backend: BackendConfig = BackendConfig()
    logging: LoggingConfig = LoggingConfig()
    properties: Dict[str, Dict[str, str]] = {
        "general": {"locale.properties.fallback": "en"},
    }


def load_config(path: str = None) -> SystemConfig:
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return SystemConfig()
    with Path(path).open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return SystemConfig.model_validate(data)
