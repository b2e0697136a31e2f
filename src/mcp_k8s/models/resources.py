"""
Models for Kubernetes type identities and cluster metadata.

GroupVersionKind and GroupVersionResource are plain named tuples so they
can be used directly as registry keys.
"""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class GroupVersionKind(NamedTuple):
    """Logical type identifier of a cluster object (e.g., apps/v1 Deployment)."""

    group: str
    version: str
    kind: str

    @property
    def group_version(self) -> str:
        """API version string as it appears in manifests ("v1", "apps/v1")."""
        return f"{self.group}/{self.version}" if self.group else self.version

    def __str__(self) -> str:
        return f"{self.group_version}, Kind={self.kind}"


class GroupVersionResource(NamedTuple):
    """REST-addressable endpoint of a kind (e.g., apps/v1 deployments)."""

    group: str
    version: str
    resource: str

    @property
    def group_version(self) -> str:
        return f"{self.group}/{self.version}" if self.group else self.version

    def __str__(self) -> str:
        return f"{self.group_version}, Resource={self.resource}"


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class APIResourceInfo(CamelModel):
    """One entry of `kubectl api-resources`."""

    name: str = Field(description="Plural resource name (e.g., deployments)")
    short_names: list[str] | None = Field(
        default=None, description="Short names (e.g., deploy)"
    )
    api_version: str = Field(description="Group/version serving the resource")
    namespaced: bool = Field(description="Whether the resource is namespaced")
    kind: str = Field(description="Kind name (e.g., Deployment)")


class KubeContext(CamelModel):
    """A kubeconfig context and the cluster it points at."""

    name: str = Field(description="Context name")
    cluster_name: str = Field(description="Cluster referenced by the context")
    is_current: bool = Field(description="Whether this is the current context")


class ContainerMetrics(CamelModel):
    """CPU and memory usage for a container."""

    name: str = Field(description="Container name")
    cpu_usage: str = Field(description="CPU usage in millicores (e.g., 250m)")
    memory_usage: str = Field(description="Memory usage (e.g., 128Mi)")


class NodeMetrics(CamelModel):
    """CPU and memory usage for a node."""

    name: str = Field(description="Node name")
    cpu_usage: str = Field(description="CPU usage in millicores")
    memory_usage: str = Field(description="Memory usage")


class PodMetrics(CamelModel):
    """CPU and memory usage for a pod, summed over its containers."""

    name: str = Field(description="Pod name")
    namespace: str = Field(description="Pod namespace")
    cpu_usage: str = Field(description="Total CPU usage in millicores")
    memory_usage: str = Field(description="Total memory usage")
    containers: list[ContainerMetrics] = Field(
        default_factory=list, description="Per-container usage"
    )
