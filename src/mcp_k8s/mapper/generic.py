"""Fallback mapper for kinds without a registered mapper."""

from typing import Any

from mcp_k8s.mapper.fields import get_name, get_namespace
from mcp_k8s.models.content import GenericResourceContent


def map_generic(item: dict[str, Any]) -> GenericResourceContent:
    """Project any object to its name and, when set, namespace."""
    return GenericResourceContent(name=get_name(item), namespace=get_namespace(item))
