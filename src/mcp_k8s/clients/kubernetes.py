"""
Kubernetes API client wrapper.

Provides read-only access to any resource type for one kubeconfig context.
Objects are returned unstructured (plain dicts parsed from the API's JSON)
so that built-in kinds and custom resources are handled alike.
"""

import logging
from functools import cached_property
from typing import Any

from kubernetes import client, config
from kubernetes.client.exceptions import ApiException

from mcp_k8s.config import Settings, get_settings
from mcp_k8s.models.resources import GroupVersionResource

logger = logging.getLogger(__name__)

METRICS_GROUP = "metrics.k8s.io"
METRICS_VERSION = "v1beta1"


class K8sClientError(Exception):
    """Base exception for Kubernetes client errors."""

    pass


class K8sNotFoundError(K8sClientError):
    """Resource not found in the cluster."""

    pass


class K8sContextError(K8sClientError):
    """Kubeconfig or context could not be loaded."""

    pass


def api_prefix(group: str, version: str) -> str:
    """REST prefix for a group/version: /api/v1 for core, /apis/<g>/<v> otherwise."""
    if not group:
        return f"/api/{version}"
    return f"/apis/{group}/{version}"


def resource_path(
    gvr: GroupVersionResource,
    namespace: str | None = None,
    name: str | None = None,
) -> str:
    """
    Build the REST path for a collection or a named object.

    Example:
        ```python
        resource_path(GroupVersionResource("apps", "v1", "deployments"), "web")
        # "/apis/apps/v1/namespaces/web/deployments"
        ```
    """
    path = api_prefix(gvr.group, gvr.version)
    if namespace:
        path += f"/namespaces/{namespace}"
    path += f"/{gvr.resource}"
    if name:
        path += f"/{name}"
    return path


class K8sClient:
    """
    Kubernetes API client wrapper bound to a single context.

    Each instance owns its own ApiClient, so clients for different contexts
    can be used side by side without touching the global configuration.

    Args:
        context: Kubeconfig context name. Empty or None uses the current
            context (or in-cluster credentials when enabled).
        settings: Optional settings override. Uses default settings if not provided.

    Example:
        ```python
        k8s = K8sClient("kind-dev")

        pods = k8s.list_resources(
            GroupVersionResource("", "v1", "pods"), namespace="default"
        )
        ```
    """

    def __init__(self, context: str | None = None, settings: Settings | None = None):
        self._settings = settings or get_settings()
        self.context = context or None
        self._api_client = self._load_config()

    def _load_config(self) -> client.ApiClient:
        """Build an ApiClient for the configured context."""
        try:
            if (
                self.context is None
                and self._settings.in_cluster
                and self._settings.is_in_cluster()
            ):
                configuration = client.Configuration()
                config.load_incluster_config(client_configuration=configuration)
                return client.ApiClient(configuration)
            return config.new_client_from_config(
                config_file=self._settings.kubeconfig_path,
                context=self.context,
            )
        except Exception as e:
            raise K8sContextError(f"Failed to load Kubernetes config: {e}") from e

    @cached_property
    def core_v1(self) -> client.CoreV1Api:
        """Core V1 API client."""
        return client.CoreV1Api(self._api_client)

    @cached_property
    def custom_objects(self) -> client.CustomObjectsApi:
        """Custom objects API client (used for metrics.k8s.io)."""
        return client.CustomObjectsApi(self._api_client)

    def _get(self, path: str, action: str, **query: Any) -> dict[str, Any]:
        """
        GET a path and return the decoded JSON body.

        Args:
            path: Absolute API path.
            action: Description used in error messages (e.g., "list resources").
            **query: Query parameters; None values are dropped.

        Raises:
            K8sNotFoundError: On HTTP 404.
            K8sClientError: On any other API failure.
        """
        query_params = [(k, v) for k, v in query.items() if v is not None]
        logger.debug("GET %s %s", path, query_params)
        try:
            return self._api_client.call_api(
                path,
                "GET",
                query_params=query_params,
                header_params={"Accept": "application/json"},
                response_type="object",
                auth_settings=["BearerToken"],
                _return_http_data_only=True,
                _request_timeout=self._settings.request_timeout_seconds,
            )
        except ApiException as e:
            if e.status == 404:
                raise K8sNotFoundError(f"Failed to {action}: {e.reason} ({path})") from e
            raise K8sClientError(f"Failed to {action}: {e.reason}") from e
        except Exception as e:
            raise K8sClientError(f"Failed to {action}: {e}") from e

    # =========================================================================
    # Discovery Methods
    # =========================================================================

    def get_api_resources(self, group: str, version: str) -> dict[str, Any]:
        """
        Get the APIResourceList served for one group/version.

        Args:
            group: API group ("" for core).
            version: API version.

        Returns:
            APIResourceList as a dict (`groupVersion`, `resources`).

        Raises:
            K8sNotFoundError: If the group/version is not served.
            K8sClientError: If discovery fails.
        """
        return self._get(
            api_prefix(group, version),
            f"discover resources for {group + '/' if group else ''}{version}",
        )

    def list_api_group_versions(self) -> list[str]:
        """
        List every group/version the server offers.

        Returns:
            Group/version strings, core versions first (e.g., ["v1",
            "apps/v1", "batch/v1", ...]).
        """
        core = self._get("/api", "discover core API versions")
        groups = self._get("/apis", "discover API groups")

        group_versions = list(core.get("versions") or [])
        for group in groups.get("groups") or []:
            for version in group.get("versions") or []:
                group_version = version.get("groupVersion")
                if group_version:
                    group_versions.append(group_version)
        return group_versions

    # =========================================================================
    # Resource Methods
    # =========================================================================

    def list_resources(
        self,
        gvr: GroupVersionResource,
        namespace: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List objects of a resource type.

        Args:
            gvr: Resolved resource endpoint.
            namespace: Namespace to query. If None or empty, queries all namespaces.

        Returns:
            List of unstructured objects.
        """
        result = self._get(resource_path(gvr, namespace), "list resources")
        return result.get("items") or []

    def get_resource(
        self,
        gvr: GroupVersionResource,
        name: str,
        namespace: str | None = None,
    ) -> dict[str, Any]:
        """
        Get a single object.

        Args:
            gvr: Resolved resource endpoint.
            name: Object name.
            namespace: Object namespace. Leave empty for cluster-scoped resources.

        Raises:
            K8sNotFoundError: If the object doesn't exist.
        """
        return self._get(resource_path(gvr, namespace, name), "get resource")

    # =========================================================================
    # Pod Log Methods
    # =========================================================================

    def get_pod_logs(
        self,
        namespace: str,
        name: str,
        container: str | None = None,
        tail_lines: int | None = None,
        since_seconds: int | None = None,
        previous: bool = False,
    ) -> str:
        """
        Get logs from a pod.

        Args:
            namespace: Pod namespace.
            name: Pod name.
            container: Container name (defaults to the pod's only/first container).
            tail_lines: Number of lines to return from the end.
            since_seconds: Only return logs newer than this many seconds.
            previous: If True, get logs from previous container instance.

        Returns:
            Log content as string.

        Raises:
            K8sNotFoundError: If pod doesn't exist.
            K8sClientError: If the API call fails.
        """
        kwargs: dict[str, Any] = {"previous": previous}
        if container:
            kwargs["container"] = container
        if tail_lines:
            kwargs["tail_lines"] = tail_lines
        if since_seconds:
            kwargs["since_seconds"] = since_seconds
        try:
            return self.core_v1.read_namespaced_pod_log(
                name=name,
                namespace=namespace,
                _request_timeout=self._settings.request_timeout_seconds,
                **kwargs,
            )
        except ApiException as e:
            if e.status == 404:
                raise K8sNotFoundError(
                    f"Pod '{name}' not found in namespace '{namespace}'"
                ) from e
            raise K8sClientError(f"Failed to get pod logs: {e.reason}") from e
        except Exception as e:
            raise K8sClientError(f"Failed to get pod logs: {e}") from e

    # =========================================================================
    # Metrics Methods
    # =========================================================================

    def list_node_metrics(self) -> list[dict[str, Any]]:
        """
        List NodeMetrics from metrics.k8s.io (requires metrics-server).

        Returns:
            List of NodeMetrics dicts with `metadata` and `usage`.
        """
        try:
            result = self.custom_objects.list_cluster_custom_object(
                METRICS_GROUP, METRICS_VERSION, "nodes"
            )
        except ApiException as e:
            raise K8sClientError(f"Failed to list node metrics: {e.reason}") from e
        except Exception as e:
            raise K8sClientError(f"Failed to list node metrics: {e}") from e
        return result.get("items") or []

    def list_pod_metrics(self, namespace: str | None = None) -> list[dict[str, Any]]:
        """
        List PodMetrics from metrics.k8s.io.

        Args:
            namespace: Namespace to query. If None or empty, queries all namespaces.

        Returns:
            List of PodMetrics dicts with `metadata` and `containers`.
        """
        try:
            if namespace:
                result = self.custom_objects.list_namespaced_custom_object(
                    METRICS_GROUP, METRICS_VERSION, namespace, "pods"
                )
            else:
                result = self.custom_objects.list_cluster_custom_object(
                    METRICS_GROUP, METRICS_VERSION, "pods"
                )
        except ApiException as e:
            raise K8sClientError(f"Failed to list pod metrics: {e.reason}") from e
        except Exception as e:
            raise K8sClientError(f"Failed to list pod metrics: {e}") from e
        return result.get("items") or []

    # =========================================================================
    # Kubeconfig Methods
    # =========================================================================

    @staticmethod
    def list_contexts(
        settings: Settings | None = None,
    ) -> tuple[list[dict[str, Any]], dict[str, Any] | None]:
        """
        Read the contexts defined in the kubeconfig.

        Returns:
            Tuple of (contexts, active_context) as returned by the kubeconfig
            loader; each context is {"name": ..., "context": {"cluster": ...}}.

        Raises:
            K8sContextError: If the kubeconfig cannot be read.
        """
        settings = settings or get_settings()
        try:
            return config.list_kube_config_contexts(
                config_file=settings.kubeconfig_path
            )
        except Exception as e:
            raise K8sContextError(f"Failed to load kubeconfig: {e}") from e
