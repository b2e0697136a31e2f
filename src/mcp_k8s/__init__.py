"""
MCP K8s - read-only Kubernetes access for AI agents.

Exposes cluster list/get, API discovery, metrics and pod logs as Model
Context Protocol tools, projecting raw API objects into compact,
kind-specific JSON.
"""

from mcp_k8s.config import Settings
from mcp_k8s.models.responses import ToolResponse, ToolStatus

__version__ = "0.1.0"
__all__ = ["ToolResponse", "ToolStatus", "Settings"]
