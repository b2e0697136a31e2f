"""
GVK to GVR resolution.

Maps a (group, version, kind) identity to the resource endpoint that serves
it by reading the server's discovery document for that group/version. Kind
matching is case-insensitive. Nothing is cached; every call performs
discovery against the cluster.
"""

import logging

from mcp_k8s.clients.kubernetes import K8sClient, K8sClientError, K8sContextError
from mcp_k8s.config import Settings
from mcp_k8s.mapper.registry import normalize_kind
from mcp_k8s.models.resources import GroupVersionKind, GroupVersionResource

logger = logging.getLogger(__name__)


class ResolutionError(K8sClientError):
    """A kind could not be mapped to a resource endpoint."""

    pass


def find_resource(api_resources: dict, kind: str) -> dict | None:
    """
    Find the entry for `kind` in an APIResourceList.

    Subresources (names with a "/", e.g. "pods/log") share their parent's
    kind and are skipped.
    """
    wanted = normalize_kind(kind)
    for resource in api_resources.get("resources") or []:
        name = resource.get("name") or ""
        if "/" in name:
            continue
        if normalize_kind(resource.get("kind") or "") == wanted:
            return resource
    return None


def client_for_context(
    context: str | None, settings: Settings | None = None
) -> K8sClient:
    """
    Build a cluster client for `context`.

    Raises:
        ResolutionError: If the kubeconfig or the context cannot be loaded.
    """
    try:
        return K8sClient(context, settings)
    except K8sContextError as e:
        logger.warning("Cannot build client for context %r: %s", context, e)
        raise ResolutionError(f"failed to create k8s clients: {e}") from e


def gvk_to_gvr(
    context: str | None,
    gvk: GroupVersionKind,
    *,
    client: K8sClient | None = None,
    settings: Settings | None = None,
) -> GroupVersionResource:
    """
    Resolve a GroupVersionKind to its GroupVersionResource.

    Args:
        context: Kubeconfig context to discover against (None/"" for current).
        gvk: Identity to resolve. The kind may use any casing.
        client: Existing client for the context. Created when not given.
        settings: Settings used when a client has to be created.

    Returns:
        The resource endpoint, e.g. ("apps", "v1", "deployments").

    Raises:
        ResolutionError: If the context cannot be loaded, discovery fails,
            or no resource of that kind is served at the group/version.
    """
    kind = normalize_kind(gvk.kind)

    if client is None:
        client = client_for_context(context, settings)

    try:
        api_resources = client.get_api_resources(gvk.group, gvk.version)
    except K8sClientError as e:
        logger.warning("Discovery failed for %s: %s", gvk.group_version, e)
        raise ResolutionError(f"failed to map kind to resource: {e}") from e

    resource = find_resource(api_resources, kind)
    if resource is None:
        logger.warning("No resource for kind %s in %s", kind, gvk.group_version)
        raise ResolutionError(
            f"failed to map kind to resource: no matches for kind "
            f'"{kind}" in version "{gvk.group_version}"'
        )

    gvr = GroupVersionResource(gvk.group, gvk.version, resource["name"])
    logger.debug("Resolved %s to %s", gvk, gvr.resource)
    return gvr
