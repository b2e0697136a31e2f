"""
MCP server wiring.

Registers the read-only tools, the kubeconfig contexts resource and the
analysis prompts on a FastMCP instance.
"""

import json
import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from mcp_k8s import prompts, tools
from mcp_k8s.clients.kubernetes import K8sClient
from mcp_k8s.config import Settings, get_settings
from mcp_k8s.mapper import MapperRegistry, get_registry
from mcp_k8s.models.resources import KubeContext

logger = logging.getLogger(__name__)

CONTEXTS_URI = "kubeconfig://contexts"

CONTEXT_DESCRIPTION = (
    "The Kubernetes context to use. To discover available contexts or resolve "
    f"cluster aliases use the {CONTEXTS_URI} MCP resource."
)

INSTRUCTIONS = f"""
This MCP server provides safe, read-only access to Kubernetes clusters through structured tools and resources.

**Key Features:**
- Safe by design: All operations are read-only, no cluster modifications possible
- No kubectl required: Direct API access through kubeconfig contexts
- Context discovery: Use the '{CONTEXTS_URI}' MCP resource to find available clusters
- Analysis prompts for memory pressure and workload instability

**Available Tools:**
- list_k8s_resources: List Kubernetes resources of any kind with compact, kind-specific output
- list_k8s_api_resources: Discover available API resource types (like kubectl api-resources)
- get_k8s_resource: Fetch an individual resource
- get_k8s_metrics: Get CPU/memory metrics for nodes and pods (like kubectl top)
- get_k8s_pod_logs: Retrieve pod logs with filtering options

**Context Usage:**
Instead of running kubectl commands, use the {CONTEXTS_URI} MCP resource to discover available cluster contexts and map cluster aliases (like 'prod', 'staging') to kubeconfig context names.

**Analysis Prompts:**
- memory_pressure_analysis: Systematic analysis of pod memory usage and OOM issues
- workload_instability_analysis: Investigation of Events and logs for instability patterns

All tools support CRDs and custom resources through API discovery.
"""

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, openWorldHint=True)


def kube_contexts(settings: Settings | None = None) -> list[KubeContext]:
    """
    List the kubeconfig contexts and the clusters they point at.

    Raises:
        K8sContextError: If the kubeconfig cannot be read.
    """
    contexts, active = K8sClient.list_contexts(settings)
    current = (active or {}).get("name")
    return [
        KubeContext(
            name=ctx["name"],
            cluster_name=(ctx.get("context") or {}).get("cluster", ""),
            is_current=ctx["name"] == current,
        )
        for ctx in contexts or []
    ]


def create_server(
    settings: Settings | None = None,
    registry: MapperRegistry | None = None,
) -> FastMCP:
    """
    Build the MCP server.

    The mapper registry is built here, once, before any request is served.

    Args:
        settings: Optional settings override. Uses default settings if not provided.
        registry: Optional mapper registry. Uses the built-in mappers if not provided.

    Returns:
        A FastMCP server ready to run.
    """
    settings = settings or get_settings()
    registry = registry if registry is not None else get_registry()
    logger.debug("Mapper registry holds %d kinds", len(registry))

    server = FastMCP(settings.server_name, instructions=INSTRUCTIONS)

    # =========================================================================
    # Tools
    # =========================================================================

    @server.tool(
        name="list_k8s_resources",
        description=f"List Kubernetes resources. {CONTEXT_DESCRIPTION}",
        annotations=READ_ONLY,
    )
    def list_k8s_resources(
        context: str,
        kind: str,
        namespace: str = "",
        group: str = "",
        version: str = "v1",
    ) -> str:
        return tools.list_k8s_resources(
            context=context,
            kind=kind,
            namespace=namespace,
            group=group,
            version=version,
            settings=settings,
            registry=registry,
        ).to_json()

    @server.tool(
        name="get_k8s_resource",
        description=(
            "Get a single Kubernetes resource. Pass an optional Jinja 'template' "
            "(e.g. '{{ metadata.name }}: {{ status.phase }}') to render fields "
            "of the raw object instead of the compact projection. "
            f"{CONTEXT_DESCRIPTION}"
        ),
        annotations=READ_ONLY,
    )
    def get_k8s_resource(
        context: str,
        kind: str,
        name: str,
        namespace: str = "",
        group: str = "",
        version: str = "v1",
        template: str = "",
    ) -> str:
        return tools.get_k8s_resource(
            context=context,
            kind=kind,
            name=name,
            namespace=namespace,
            group=group,
            version=version,
            template=template,
            settings=settings,
            registry=registry,
        ).to_json()

    @server.tool(
        name="list_k8s_api_resources",
        description=(
            "List available Kubernetes API resources (equivalent to "
            "`kubectl api-resources`). Leave group empty for all groups or "
            f"use 'core' for the core group. {CONTEXT_DESCRIPTION}"
        ),
        annotations=READ_ONLY,
    )
    def list_k8s_api_resources(context: str, group: str = "") -> str:
        return tools.list_k8s_api_resources(
            context=context, group=group, settings=settings
        ).to_json()

    @server.tool(
        name="get_k8s_metrics",
        description=(
            "Get Kubernetes resource metrics (CPU/memory usage) for nodes or "
            "pods, similar to kubectl top. kind must be 'node' or 'pod'; "
            "namespace is ignored for nodes and defaults to all namespaces "
            f"for pods. {CONTEXT_DESCRIPTION}"
        ),
        annotations=READ_ONLY,
    )
    def get_k8s_metrics(context: str, kind: str, namespace: str = "") -> str:
        return tools.get_k8s_metrics(
            context=context, kind=kind, namespace=namespace, settings=settings
        ).to_json()

    @server.tool(
        name="get_k8s_pod_logs",
        description=(
            "Get logs from a Kubernetes pod, similar to kubectl logs. 'since' "
            "(Go duration such as '5m', '1.5h', '1h30m' or '500ms'; 'd' for days) "
            "and 'sinceTime' (RFC 3339) cannot be combined. "
            f"tail defaults to {settings.default_log_tail_lines} lines. "
            f"{CONTEXT_DESCRIPTION}"
        ),
        annotations=READ_ONLY,
    )
    def get_k8s_pod_logs(
        context: str,
        namespace: str,
        name: str,
        container: str = "",
        since: str = "",
        sinceTime: str = "",  # noqa: N803
        tail: int | None = None,
        previous: bool = False,
    ) -> str:
        return tools.get_k8s_pod_logs(
            context=context,
            namespace=namespace,
            name=name,
            container=container,
            since=since,
            since_time=sinceTime,
            tail=tail,
            previous=previous,
            settings=settings,
        ).to_json()

    # =========================================================================
    # Resources
    # =========================================================================

    @server.resource(
        CONTEXTS_URI,
        name="kubeconfig_contexts",
        description=(
            "Current user's kubeconfig contexts - maps context names to cluster "
            "names for resolving cluster aliases like 'prod' or 'sandbox'. Use "
            "this resource to discover available Kubernetes contexts instead "
            "of running `kubectl config`."
        ),
        mime_type="application/json",
    )
    def kubeconfig_contexts() -> str:
        contexts = kube_contexts(settings)
        return json.dumps([c.model_dump(by_alias=True) for c in contexts])

    # =========================================================================
    # Prompts
    # =========================================================================

    @server.prompt(
        name="memory_pressure_analysis",
        description=(
            "Analyze pods for memory pressure issues including high usage, "
            "exceeding requests, and OOM kills."
        ),
    )
    def memory_pressure_analysis(context: str, namespace: str = "") -> str:
        return prompts.memory_pressure_analysis(context, namespace)

    @server.prompt(
        name="workload_instability_analysis",
        description=(
            "Analyze Events and pod logs in a namespace for signs of workload "
            "instability, prioritized from most to least critical."
        ),
    )
    def workload_instability_analysis(context: str, namespace: str) -> str:
        return prompts.workload_instability_analysis(context, namespace)

    return server
