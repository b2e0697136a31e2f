"""
Metrics Tools.

CPU and memory usage for nodes and pods from the metrics.k8s.io API
(requires metrics-server), similar to `kubectl top`.
"""

import math
from datetime import datetime
from decimal import Decimal
from typing import Any

from kubernetes.utils import parse_quantity

from mcp_k8s.config import Settings, get_settings
from mcp_k8s.models.resources import ContainerMetrics, NodeMetrics, PodMetrics
from mcp_k8s.models.responses import ToolResponse, add_execution_metadata
from mcp_k8s.resolver import client_for_context
from mcp_k8s.tools.base import ToolValidationError, require_params, tool_handler

MIB = 1024 * 1024
METRIC_KINDS = ("node", "pod")


def _quantity(usage: dict[str, Any] | None, resource: str) -> Decimal:
    value = (usage or {}).get(resource)
    if value is None:
        return Decimal(0)
    return parse_quantity(value)


def format_cpu(cores: Decimal) -> str:
    """Format CPU cores as whole millicores, rounding up (e.g., "250m")."""
    return f"{math.ceil(cores * 1000)}m"


def format_memory(size: Decimal) -> str:
    """Format bytes as whole MiB ("128Mi"), or plain bytes below one MiB."""
    size_bytes = math.ceil(size)
    if size_bytes >= MIB:
        return f"{size_bytes // MIB}Mi"
    return str(size_bytes)


def node_metrics(items: list[dict[str, Any]]) -> list[NodeMetrics]:
    """Convert NodeMetrics objects to usage entries."""
    return [
        NodeMetrics(
            name=(item.get("metadata") or {}).get("name", ""),
            cpu_usage=format_cpu(_quantity(item.get("usage"), "cpu")),
            memory_usage=format_memory(_quantity(item.get("usage"), "memory")),
        )
        for item in items
    ]


def pod_metrics(items: list[dict[str, Any]]) -> list[PodMetrics]:
    """Convert PodMetrics objects to usage entries with per-pod totals."""
    pods = []
    for item in items:
        metadata = item.get("metadata") or {}
        total_cpu = Decimal(0)
        total_memory = Decimal(0)
        containers = []

        for container in item.get("containers") or []:
            cpu = _quantity(container.get("usage"), "cpu")
            memory = _quantity(container.get("usage"), "memory")
            total_cpu += cpu
            total_memory += memory
            containers.append(
                ContainerMetrics(
                    name=container.get("name", ""),
                    cpu_usage=format_cpu(cpu),
                    memory_usage=format_memory(memory),
                )
            )

        pods.append(
            PodMetrics(
                name=metadata.get("name", ""),
                namespace=metadata.get("namespace", ""),
                cpu_usage=format_cpu(total_cpu),
                memory_usage=format_memory(total_memory),
                containers=containers,
            )
        )
    return pods


@tool_handler
def get_k8s_metrics(
    context: str,
    kind: str,
    namespace: str = "",
    settings: Settings | None = None,
) -> ToolResponse:
    """
    Get CPU/memory usage for nodes or pods, similar to `kubectl top`.

    Args:
        context: Kubeconfig context to query.
        kind: "node" or "pod" (case-insensitive).
        namespace: Pod namespace. Ignored for nodes; empty means all namespaces.
        settings: Optional settings override for testing.

    Returns:
        ToolResponse with result containing:
        - metrics: Node entries {name, cpuUsage, memoryUsage}, or pod entries
          that add namespace and per-container usage
        - count: Number of entries

    Example:
        ```python
        result = get_k8s_metrics(context="kind-dev", kind="pod", namespace="web")
        ```
    """
    start_time = datetime.now()
    require_params(kind=kind)
    kind = kind.strip().lower()
    if kind not in METRIC_KINDS:
        raise ToolValidationError("kind must be 'node' or 'pod'")

    settings = settings or get_settings()
    k8s = client_for_context(context, settings)

    if kind == "node":
        entries = node_metrics(k8s.list_node_metrics())
    else:
        entries = pod_metrics(k8s.list_pod_metrics(namespace or None))

    metrics = [entry.model_dump(by_alias=True) for entry in entries]

    return ToolResponse.success(
        result={"metrics": metrics, "count": len(metrics)},
        metadata=add_execution_metadata(
            {},
            start_time,
            context=context,
            kind=kind,
            namespace=namespace or "all",
        ),
    )
