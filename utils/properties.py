# utils/properties.py
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Optional

GENERAL_RESOURCE = "general"
LOCALE_FALLBACK_KEY = "locale.properties.fallback"


class PropertiesLookup:
    """Read-only view over ``{resource: {key: value}}`` property sets."""

    def __init__(self, properties: Mapping[str, Mapping[str, str]]):
        self._props = MappingProxyType({r: MappingProxyType(dict(kv)) for r, kv in properties.items()})

    def get_property_value(self, resource: str, key: str, default: Optional[str] = None) -> Optional[str]:
        values = self._props.get(resource)
        if values is None:
            return default
        return values.get(key, default)


def determine_default_language(lookup: PropertiesLookup) -> Optional[str]:
    return lookup.get_property_value(GENERAL_RESOURCE, LOCALE_FALLBACK_KEY)
