"""
Projection models for Kubernetes resources.

Each model is the stable, kind-specific shape a mapper extracts from an
unstructured object. Every field except `name` is optional and omitted from
the serialised output when it could not be extracted.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResourceContent(BaseModel):
    """Base projection: a named object serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(description="Object name")

    def to_content(self) -> dict[str, Any]:
        """Serialise to the client-facing JSON shape, dropping absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class NamespacedResourceContent(ResourceContent):
    """Projection of an object that may live in a namespace."""

    namespace: str | None = Field(default=None, description="Object namespace")


class GenericResourceContent(NamespacedResourceContent):
    """Fallback projection for kinds without a registered mapper."""


class PodContent(NamespacedResourceContent):
    """Pod fields for list display (kubectl get pods plus memory details)."""

    status: str | None = Field(default=None, description="Pod phase")
    ready: str | None = Field(default=None, description="Ready/total containers")
    restarts: int | None = Field(default=None, description="Sum of restarts")
    age: str | None = Field(default=None, description="Time since creation")
    memory_request_mib: int | None = Field(
        default=None,
        alias="memoryRequestMiB",
        description="Summed container memory requests in MiB",
    )
    memory_limit_mib: int | None = Field(
        default=None,
        alias="memoryLimitMiB",
        description="Summed container memory limits in MiB",
    )
    oom_kills: int | None = Field(
        default=None, description="OOMKilled terminations (last and current state)"
    )
    last_termination_reason: str | None = Field(
        default=None, description="Reason of the last container termination"
    )


class DeploymentContent(NamespacedResourceContent):
    """Deployment fields for list display."""

    ready: str | None = Field(default=None, description="readyReplicas/replicas")
    up_to_date: int | None = Field(default=None, description="Updated replicas")
    available: int | None = Field(default=None, description="Available replicas")
    age: str | None = Field(default=None, description="Time since creation")


class StatefulSetContent(NamespacedResourceContent):
    """StatefulSet fields for list display."""

    ready: str | None = Field(default=None, description="readyReplicas/replicas")
    age: str | None = Field(default=None, description="Time since creation")


class DaemonSetContent(NamespacedResourceContent):
    """DaemonSet fields for list display."""

    desired: int | None = Field(default=None, description="Desired scheduled pods")
    current: int | None = Field(default=None, description="Currently scheduled pods")
    ready: int | None = Field(default=None, description="Ready pods")
    up_to_date: int | None = Field(default=None, description="Updated pods")
    available: int | None = Field(default=None, description="Available pods")
    age: str | None = Field(default=None, description="Time since creation")


class ServiceContent(NamespacedResourceContent):
    """Service fields for list display."""

    type: str | None = Field(default=None, description="Service type")
    cluster_ip: str | None = Field(
        default=None, alias="clusterIP", description="Cluster IP"
    )
    external_ip: list[str] | None = Field(
        default=None, alias="externalIP", description="External IPs"
    )
    port: str | None = Field(
        default=None, description="First port as port/protocol"
    )
    age: str | None = Field(default=None, description="Time since creation")


class IngressContent(NamespacedResourceContent):
    """Ingress fields for list display."""

    class_: str | None = Field(
        default=None, alias="class", description="Ingress class name"
    )
    hosts: list[str] | None = Field(default=None, description="Rule hostnames")
    address: str | None = Field(
        default=None, description="Load balancer IPs and hostnames, comma-joined"
    )
    ports: str | None = Field(default=None, description="Served ports")
    age: str | None = Field(default=None, description="Time since creation")


class JobContent(NamespacedResourceContent):
    """Job fields for list display."""

    completions: str | None = Field(
        default=None, description="succeeded/desired, with failed suffix"
    )
    duration: str | None = Field(
        default=None, description="'running' or 'completed'"
    )
    age: str | None = Field(default=None, description="Time since creation")


class CronJobContent(NamespacedResourceContent):
    """CronJob fields for list display."""

    schedule: str | None = Field(default=None, description="Cron schedule")
    suspend: bool | None = Field(default=None, description="Whether suspended")
    active: int | None = Field(default=None, description="Active job count")
    last_schedule: str | None = Field(
        default=None, description="Last schedule timestamp"
    )
    age: str | None = Field(default=None, description="Time since creation")


class NodeContent(ResourceContent):
    """Node fields for list display. Nodes are cluster-scoped."""

    status: str | None = Field(default=None, description="Ready or NotReady")
    roles: list[str] | None = Field(default=None, description="Node roles")
    age: str | None = Field(default=None, description="Time since creation")
    version: str | None = Field(default=None, description="Kubelet version")
    internal_ip: str | None = Field(
        default=None, alias="internalIP", description="InternalIP address"
    )
    external_ip: str | None = Field(
        default=None, alias="externalIP", description="ExternalIP address"
    )
    os_image: str | None = Field(default=None, description="OS image")
    kernel_version: str | None = Field(default=None, description="Kernel version")
    container_runtime: str | None = Field(
        default=None, description="Container runtime version"
    )


class EventContent(NamespacedResourceContent):
    """Event fields, uniform across core/v1 and events.k8s.io."""

    type: str | None = Field(default=None, description="Normal or Warning")
    reason: str | None = Field(default=None, description="Short reason code")
    message: str | None = Field(
        default=None, description="Description (core 'message' or 'note')"
    )
    involved_object: str | None = Field(
        default=None, description="kind/name of the object the event is about"
    )
    source: str | None = Field(default=None, description="Reporting component")
    count: int | None = Field(default=None, description="Occurrences")
    first_timestamp: str | None = Field(default=None, description="core/v1 only")
    last_timestamp: str | None = Field(default=None, description="core/v1 only")
    event_time: str | None = Field(default=None, description="events.k8s.io time")
    age: str | None = Field(
        default=None, description="Time since first occurrence or event time"
    )


class CustomResourceDefinitionContent(ResourceContent):
    """CustomResourceDefinition fields. CRDs are cluster-scoped."""

    group: str | None = Field(default=None, description="Served API group")
    kind: str | None = Field(default=None, description="Kind of the custom resource")
    scope: str | None = Field(default=None, description="Namespaced or Cluster")
    versions: list[str] | None = Field(default=None, description="Declared versions")
    age: str | None = Field(default=None, description="Time since creation")
    singular: str | None = Field(default=None, description="Singular name")
    plural: str | None = Field(default=None, description="Plural resource name")
    short_name: str | None = Field(default=None, description="First short name")
