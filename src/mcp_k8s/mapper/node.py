"""Node mapper."""

from typing import Any

from mcp_k8s.mapper.fields import (
    creation_age,
    get_labels,
    get_name,
    nested_list,
    nested_string,
)
from mcp_k8s.mapper.registry import MapperRegistry
from mcp_k8s.models.content import NodeContent
from mcp_k8s.models.resources import GroupVersionKind

NODE_GVK = GroupVersionKind("", "v1", "Node")

ROLE_LABEL_PREFIX = "node-role.kubernetes.io/"
NO_ROLES = "<none>"


def map_node(item: dict[str, Any]) -> NodeContent:
    """
    Project a Node.

    Status is "Ready"/"NotReady" from the Ready condition. Roles come from
    node-role.kubernetes.io/<role> label keys, with "<none>" when the node
    has labels but no role label.
    """
    node = NodeContent(
        name=get_name(item),
        age=creation_age(item),
        version=nested_string(item, "status", "nodeInfo", "kubeletVersion"),
        os_image=nested_string(item, "status", "nodeInfo", "osImage"),
        kernel_version=nested_string(item, "status", "nodeInfo", "kernelVersion"),
        container_runtime=nested_string(
            item, "status", "nodeInfo", "containerRuntimeVersion"
        ),
    )

    for condition in nested_list(item, "status", "conditions") or []:
        if nested_string(condition, "type") != "Ready":
            continue
        status = nested_string(condition, "status")
        if status is not None:
            node.status = "Ready" if status == "True" else "NotReady"

    labels = get_labels(item)
    if labels is not None:
        roles = sorted(
            key[len(ROLE_LABEL_PREFIX) :]
            for key in labels
            if key.startswith(ROLE_LABEL_PREFIX) and key != ROLE_LABEL_PREFIX
        )
        node.roles = roles or [NO_ROLES]

    for address in nested_list(item, "status", "addresses") or []:
        addr_type = nested_string(address, "type")
        addr = nested_string(address, "address")
        if addr_type is None or addr is None:
            continue
        if addr_type == "InternalIP":
            node.internal_ip = addr
        elif addr_type == "ExternalIP":
            node.external_ip = addr

    return node


def register(registry: MapperRegistry) -> None:
    registry.register(NODE_GVK, map_node)
