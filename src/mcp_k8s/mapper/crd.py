"""CustomResourceDefinition mapper (apiextensions.k8s.io v1 and v1beta1)."""

from typing import Any

from mcp_k8s.mapper.fields import (
    creation_age,
    get_name,
    nested_list,
    nested_map,
    nested_string,
)
from mcp_k8s.mapper.registry import MapperRegistry
from mcp_k8s.models.content import CustomResourceDefinitionContent
from mcp_k8s.models.resources import GroupVersionKind

CRD_GVKS = (
    GroupVersionKind("apiextensions.k8s.io", "v1", "CustomResourceDefinition"),
    GroupVersionKind("apiextensions.k8s.io", "v1beta1", "CustomResourceDefinition"),
)


def map_crd(item: dict[str, Any]) -> CustomResourceDefinitionContent:
    content = CustomResourceDefinitionContent(
        name=get_name(item),
        group=nested_string(item, "spec", "group"),
        scope=nested_string(item, "spec", "scope"),
        age=creation_age(item),
    )

    names = nested_map(item, "spec", "names")
    if names is not None:
        content.kind = nested_string(names, "kind")
        content.singular = nested_string(names, "singular")
        content.plural = nested_string(names, "plural")
        short_names = nested_list(names, "shortNames")
        if short_names and isinstance(short_names[0], str):
            content.short_name = short_names[0]

    versions = [
        nested_string(v, "name") for v in nested_list(item, "spec", "versions") or []
    ]
    content.versions = [v for v in versions if v is not None] or None

    return content


def register(registry: MapperRegistry) -> None:
    for gvk in CRD_GVKS:
        registry.register(gvk, map_crd)
