"""
API Discovery Tools.

Lists the resource types a cluster serves, like `kubectl api-resources`.
"""

import logging
from datetime import datetime
from typing import Any

from mcp_k8s.clients.kubernetes import K8sClient, K8sClientError
from mcp_k8s.config import Settings, get_settings
from mcp_k8s.models.resources import APIResourceInfo
from mcp_k8s.models.responses import ToolResponse, add_execution_metadata
from mcp_k8s.resolver import client_for_context
from mcp_k8s.tools.base import tool_handler

logger = logging.getLogger(__name__)

CORE_GROUP = "core"


def matches_group(group_version: str, group_filter: str) -> bool:
    """
    Check whether a group/version string belongs to `group_filter`.

    An empty filter matches everything. "core" selects the core group ("v1");
    any other filter is compared against the part before the slash.
    """
    if not group_filter:
        return True
    if group_filter == CORE_GROUP:
        return group_version == "v1"
    group, sep, _ = group_version.partition("/")
    return bool(sep) and group == group_filter


def _split_group_version(group_version: str) -> tuple[str, str]:
    group, sep, version = group_version.partition("/")
    if not sep:
        return "", group
    return group, version


def _resource_infos(api_resources: dict[str, Any]) -> list[APIResourceInfo]:
    group_version = api_resources.get("groupVersion", "")
    infos = []
    for resource in api_resources.get("resources") or []:
        name = resource.get("name") or ""
        if not name or "/" in name:
            continue
        infos.append(
            APIResourceInfo(
                name=name,
                short_names=resource.get("shortNames") or None,
                api_version=group_version,
                namespaced=bool(resource.get("namespaced")),
                kind=resource.get("kind") or "",
            )
        )
    return infos


def discover_api_resources(
    k8s: K8sClient, group: str = ""
) -> tuple[list[APIResourceInfo], list[str]]:
    """
    Walk the served group/versions and collect their resource types.

    Args:
        k8s: Client for the target context.
        group: Group filter; "" for all groups, "core" for core v1 only.

    Returns:
        Tuple of (resources, warnings). A group/version whose discovery
        fails adds a warning instead of failing the whole walk.

    Raises:
        K8sClientError: If the group list itself can't be read, or every
            selected group/version failed.
    """
    group_versions = [
        gv for gv in k8s.list_api_group_versions() if matches_group(gv, group)
    ]

    resources: list[APIResourceInfo] = []
    warnings: list[str] = []
    for group_version in group_versions:
        try:
            api_resources = k8s.get_api_resources(
                *_split_group_version(group_version)
            )
        except K8sClientError as e:
            logger.warning("Skipping %s: %s", group_version, e)
            warnings.append(f"{group_version}: {e}")
            continue
        resources.extend(_resource_infos(api_resources))

    if warnings and len(warnings) == len(group_versions):
        raise K8sClientError(f"Failed to get API resources: {warnings[0]}")
    return resources, warnings


@tool_handler
def list_k8s_api_resources(
    context: str,
    group: str = "",
    settings: Settings | None = None,
) -> ToolResponse:
    """
    List available Kubernetes API resources (like `kubectl api-resources`).

    Subresources such as pods/log are not included.

    Args:
        context: Kubeconfig context to query.
        group: API group filter. Empty returns all groups; "core" returns
            the core group only.
        settings: Optional settings override for testing.

    Returns:
        ToolResponse with result containing:
        - resources: List of {name, shortNames, apiVersion, namespaced, kind}
        - count: Number of resource types
        Status is partial when some group/versions failed discovery.
    """
    start_time = datetime.now()
    settings = settings or get_settings()
    k8s = client_for_context(context, settings)

    infos, warnings = discover_api_resources(k8s, group.strip())
    resources = [
        info.model_dump(by_alias=True, exclude_none=True) for info in infos
    ]

    result = {"resources": resources, "count": len(resources)}
    metadata = add_execution_metadata(
        {}, start_time, context=context, group=group or "all"
    )
    if warnings:
        return ToolResponse.partial(result=result, warnings=warnings, metadata=metadata)
    return ToolResponse.success(result=result, metadata=metadata)
