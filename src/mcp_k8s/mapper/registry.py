"""
Resource mapper registry.

Maps a (group, version, kind) identity to the function that projects an
unstructured object of that type into its structured content. Kinds are
normalised on both registration and lookup so callers may use any casing.
"""

import logging
from functools import lru_cache
from typing import Any, Callable

from mcp_k8s.models.resources import GroupVersionKind

logger = logging.getLogger(__name__)

ResourceMapper = Callable[[dict[str, Any]], Any]


def normalize_kind(kind: str) -> str:
    """
    Normalise a kind for use as a registry key.

    The first character is upper-cased and the rest lower-cased, so "pod",
    "POD" and "Pod" all become "Pod". Multi-word kinds lose their inner
    capitals ("ConfigMap" -> "Configmap"); the result is a lookup key, not a
    display name.
    """
    if not kind:
        return kind
    first = kind[0].upper()
    # "ß".upper() is "SS"; a multi-char expansion would not survive a second pass
    if len(first) != 1:
        first = kind[0]
    return first + kind[1:].lower()


def normalize_gvk(gvk: GroupVersionKind) -> GroupVersionKind:
    """Return `gvk` with its kind normalised; group and version are untouched."""
    return gvk._replace(kind=normalize_kind(gvk.kind))


class MapperRegistry:
    """
    Registry of per-kind resource mappers.

    Populate it once at startup, before any request is served; after that it
    is only read, which is safe from any number of threads.

    Example:
        ```python
        registry = MapperRegistry()
        registry.register(GroupVersionKind("", "v1", "pod"), map_pod)

        registry.get(GroupVersionKind("", "v1", "POD"))  # map_pod
        ```
    """

    def __init__(self) -> None:
        self._mappers: dict[GroupVersionKind, ResourceMapper] = {}

    def register(self, gvk: GroupVersionKind, mapper: ResourceMapper) -> None:
        """
        Register `mapper` for `gvk`.

        A later registration for an identity that normalises to the same key
        replaces the earlier one.
        """
        key = normalize_gvk(gvk)
        if key in self._mappers and self._mappers[key] is not mapper:
            logger.debug("Replacing mapper for %s", key)
        self._mappers[key] = mapper

    def get(self, gvk: GroupVersionKind) -> ResourceMapper | None:
        """Return the mapper for `gvk`, or None when the kind has none."""
        return self._mappers.get(normalize_gvk(gvk))

    def clear(self) -> None:
        self._mappers.clear()

    def __contains__(self, gvk: object) -> bool:
        if not isinstance(gvk, GroupVersionKind):
            return False
        return normalize_gvk(gvk) in self._mappers

    def __len__(self) -> int:
        return len(self._mappers)

    def identities(self) -> list[GroupVersionKind]:
        """Registered (normalised) identities, sorted for stable output."""
        return sorted(self._mappers)


def build_default_registry() -> MapperRegistry:
    """
    Build a registry holding every built-in mapper.

    Returns:
        A fully populated MapperRegistry.
    """
    # Imported here so the per-kind modules can import this one
    from mcp_k8s.mapper import batch, crd, event, network, node, pod, workloads

    registry = MapperRegistry()
    for module in (pod, workloads, network, batch, node, event, crd):
        module.register(registry)
    logger.debug("Registered %d resource mappers", len(registry))
    return registry


@lru_cache
def get_registry() -> MapperRegistry:
    """
    Get the process-wide registry of built-in mappers.

    The server calls this once during startup so the registry is complete
    before the first request arrives.
    """
    return build_default_registry()
