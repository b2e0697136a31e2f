"""Tools package - read-only Kubernetes tool implementations."""

from mcp_k8s.tools.discovery import list_k8s_api_resources
from mcp_k8s.tools.logs import get_k8s_pod_logs
from mcp_k8s.tools.metrics import get_k8s_metrics
from mcp_k8s.tools.resources import get_k8s_resource, list_k8s_resources

__all__ = [
    # Resource tools
    "list_k8s_resources",
    "get_k8s_resource",
    # Discovery tools
    "list_k8s_api_resources",
    # Metrics tools
    "get_k8s_metrics",
    # Log tools
    "get_k8s_pod_logs",
]
