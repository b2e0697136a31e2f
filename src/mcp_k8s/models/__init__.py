"""Models package - Pydantic models for projections, identities and responses."""

from mcp_k8s.models.content import (
    CronJobContent,
    CustomResourceDefinitionContent,
    DaemonSetContent,
    DeploymentContent,
    EventContent,
    GenericResourceContent,
    IngressContent,
    JobContent,
    NamespacedResourceContent,
    NodeContent,
    PodContent,
    ResourceContent,
    ServiceContent,
    StatefulSetContent,
)
from mcp_k8s.models.resources import (
    APIResourceInfo,
    ContainerMetrics,
    GroupVersionKind,
    GroupVersionResource,
    KubeContext,
    NodeMetrics,
    PodMetrics,
)
from mcp_k8s.models.responses import ToolResponse, ToolStatus

__all__ = [
    # Response models
    "ToolResponse",
    "ToolStatus",
    # Identity and cluster metadata
    "GroupVersionKind",
    "GroupVersionResource",
    "APIResourceInfo",
    "KubeContext",
    "NodeMetrics",
    "PodMetrics",
    "ContainerMetrics",
    # Projections
    "ResourceContent",
    "NamespacedResourceContent",
    "GenericResourceContent",
    "PodContent",
    "DeploymentContent",
    "StatefulSetContent",
    "DaemonSetContent",
    "ServiceContent",
    "IngressContent",
    "JobContent",
    "CronJobContent",
    "NodeContent",
    "EventContent",
    "CustomResourceDefinitionContent",
]
