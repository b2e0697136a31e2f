"""
Workload controller mappers: Deployment, StatefulSet and DaemonSet.
"""

from typing import Any

from mcp_k8s.mapper.fields import creation_age, get_name, get_namespace, nested_int
from mcp_k8s.mapper.registry import MapperRegistry
from mcp_k8s.models.content import (
    DaemonSetContent,
    DeploymentContent,
    StatefulSetContent,
)
from mcp_k8s.models.resources import GroupVersionKind

DEPLOYMENT_GVK = GroupVersionKind("apps", "v1", "Deployment")
STATEFULSET_GVK = GroupVersionKind("apps", "v1", "StatefulSet")
DAEMONSET_GVK = GroupVersionKind("apps", "v1", "DaemonSet")


def _ready_ratio(ready: int | None, desired: int | None) -> str | None:
    """Format "ready/desired"; ready defaults to 0, None without a desired count."""
    if desired is None:
        return None
    return f"{ready or 0}/{desired}"


def map_deployment(item: dict[str, Any]) -> DeploymentContent:
    """Project a Deployment. Ready comes from status.readyReplicas/status.replicas."""
    return DeploymentContent(
        name=get_name(item),
        namespace=get_namespace(item),
        ready=_ready_ratio(
            nested_int(item, "status", "readyReplicas"),
            nested_int(item, "status", "replicas"),
        ),
        up_to_date=nested_int(item, "status", "updatedReplicas"),
        available=nested_int(item, "status", "availableReplicas"),
        age=creation_age(item),
    )


def map_statefulset(item: dict[str, Any]) -> StatefulSetContent:
    """Project a StatefulSet. Unlike Deployments the desired count is spec.replicas."""
    return StatefulSetContent(
        name=get_name(item),
        namespace=get_namespace(item),
        ready=_ready_ratio(
            nested_int(item, "status", "readyReplicas"),
            nested_int(item, "spec", "replicas"),
        ),
        age=creation_age(item),
    )


def map_daemonset(item: dict[str, Any]) -> DaemonSetContent:
    def counter(field: str) -> int:
        return nested_int(item, "status", field) or 0

    return DaemonSetContent(
        name=get_name(item),
        namespace=get_namespace(item),
        desired=counter("desiredNumberScheduled"),
        current=counter("currentNumberScheduled"),
        ready=counter("numberReady"),
        up_to_date=counter("updatedNumberScheduled"),
        available=counter("numberAvailable"),
        age=creation_age(item),
    )


def register(registry: MapperRegistry) -> None:
    registry.register(DEPLOYMENT_GVK, map_deployment)
    registry.register(STATEFULSET_GVK, map_statefulset)
    registry.register(DAEMONSET_GVK, map_daemonset)
