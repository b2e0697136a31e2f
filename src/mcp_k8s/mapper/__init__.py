"""Mapper package - unstructured object to structured content projection."""

from mcp_k8s.mapper.dispatch import project_list, project_one, resolve_mapper
from mcp_k8s.mapper.generic import map_generic
from mcp_k8s.mapper.memory import parse_memory_to_mib
from mcp_k8s.mapper.registry import (
    MapperRegistry,
    ResourceMapper,
    build_default_registry,
    get_registry,
    normalize_gvk,
    normalize_kind,
)

__all__ = [
    # Registry
    "MapperRegistry",
    "ResourceMapper",
    "build_default_registry",
    "get_registry",
    "normalize_kind",
    "normalize_gvk",
    # Projection
    "project_one",
    "project_list",
    "resolve_mapper",
    "map_generic",
    # Helpers
    "parse_memory_to_mib",
]
