"""Clients package - cluster API access."""

from mcp_k8s.clients.kubernetes import (
    K8sClient,
    K8sClientError,
    K8sContextError,
    K8sNotFoundError,
)

__all__ = [
    "K8sClient",
    "K8sClientError",
    "K8sContextError",
    "K8sNotFoundError",
]
