"""
Content projection for single objects and lists.

Ties the registry to the fallback mapper: registered kinds get their
kind-specific projection, everything else gets name and namespace.
"""

from typing import Any, Iterable

from mcp_k8s.mapper.generic import map_generic
from mcp_k8s.mapper.registry import MapperRegistry, ResourceMapper, get_registry
from mcp_k8s.models.resources import GroupVersionKind


def resolve_mapper(
    gvk: GroupVersionKind,
    registry: MapperRegistry | None = None,
) -> ResourceMapper:
    """Return the registered mapper for `gvk`, or the generic fallback."""
    registry = registry if registry is not None else get_registry()
    return registry.get(gvk) or map_generic


def project_one(
    item: dict[str, Any],
    gvk: GroupVersionKind,
    registry: MapperRegistry | None = None,
) -> Any:
    """
    Project a single unstructured object.

    Args:
        item: The object as returned by the API.
        gvk: Identity the caller asked for (any kind casing).
        registry: Optional registry override for testing.

    Returns:
        The mapper's projection. Never raises for well-formed JSON input.
    """
    return resolve_mapper(gvk, registry)(item)


def project_list(
    items: Iterable[dict[str, Any]],
    gvk: GroupVersionKind,
    registry: MapperRegistry | None = None,
) -> list[Any]:
    """
    Project every object of a list with one mapper.

    The mapper is looked up once for the whole list, not per item.
    """
    mapper = resolve_mapper(gvk, registry)
    return [mapper(item) for item in items]
