# orchestrator/context.py
from __future__ import annotations
from dataclasses import dataclass
from core.paths import NodePaths
from core.repository import SessionProvider
from utils.properties import PropertiesLookup

@dataclass(frozen=True)
class Context:
    cfg: any
    provider: SessionProvider
    paths: NodePaths
    properties: PropertiesLookup
