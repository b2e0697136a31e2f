"""Tests for the Kubernetes client wrapper."""

from unittest.mock import patch

import pytest
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import MaxRetryError

from mcp_k8s.clients.kubernetes import (
    K8sClient,
    K8sClientError,
    K8sContextError,
    K8sNotFoundError,
    resource_path,
)
from mcp_k8s.models import GroupVersionResource

PODS = GroupVersionResource("", "v1", "pods")
DEPLOYMENTS = GroupVersionResource("apps", "v1", "deployments")


@pytest.fixture
def api_client():
    with patch("mcp_k8s.clients.kubernetes.config.new_client_from_config") as factory:
        yield factory.return_value


class TestResourcePath:

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "gvr,namespace,name,expected",
        [
            (PODS, None, None, "/api/v1/pods"),
            (PODS, "shop", None, "/api/v1/namespaces/shop/pods"),
            (PODS, "shop", "web-0", "/api/v1/namespaces/shop/pods/web-0"),
            (DEPLOYMENTS, "", None, "/apis/apps/v1/deployments"),
            (
                GroupVersionResource("", "v1", "nodes"),
                None,
                "worker-1",
                "/api/v1/nodes/worker-1",
            ),
        ],
    )
    def test_paths(self, gvr, namespace, name, expected):
        assert resource_path(gvr, namespace, name) == expected


class TestClientConstruction:

    @pytest.mark.unit
    def test_uses_requested_context(self, settings):
        with patch(
            "mcp_k8s.clients.kubernetes.config.new_client_from_config"
        ) as factory:
            K8sClient("staging", settings)

        factory.assert_called_once_with(
            config_file=settings.kubeconfig_path, context="staging"
        )

    @pytest.mark.unit
    def test_empty_context_means_current(self, settings):
        with patch(
            "mcp_k8s.clients.kubernetes.config.new_client_from_config"
        ) as factory:
            K8sClient("", settings)

        assert factory.call_args.kwargs["context"] is None

    @pytest.mark.unit
    def test_unknown_context_raises_context_error(self, settings):
        with patch(
            "mcp_k8s.clients.kubernetes.config.new_client_from_config",
            side_effect=ConfigException(
                "Invalid kube-config file. Expected object with name nope "
                "in kube-config/contexts list"
            ),
        ):
            with pytest.raises(K8sContextError, match="Expected object with name"):
                K8sClient("nope", settings)


class TestRequests:

    @pytest.mark.unit
    def test_list_resources(self, api_client, settings):
        api_client.call_api.return_value = {"items": [{"metadata": {"name": "a"}}]}

        items = K8sClient("dev", settings).list_resources(PODS, namespace="shop")

        assert items == [{"metadata": {"name": "a"}}]
        args, kwargs = api_client.call_api.call_args
        assert args == ("/api/v1/namespaces/shop/pods", "GET")
        assert kwargs["response_type"] == "object"
        assert kwargs["_request_timeout"] == settings.request_timeout_seconds

    @pytest.mark.unit
    def test_list_resources_null_items(self, api_client, settings):
        api_client.call_api.return_value = {"items": None}
        assert K8sClient("dev", settings).list_resources(PODS) == []

    @pytest.mark.unit
    def test_not_found(self, api_client, settings):
        api_client.call_api.side_effect = ApiException(status=404, reason="Not Found")

        with pytest.raises(K8sNotFoundError):
            K8sClient("dev", settings).get_resource(PODS, "ghost", "shop")

    @pytest.mark.unit
    def test_api_failure(self, api_client, settings):
        api_client.call_api.side_effect = ApiException(status=403, reason="Forbidden")

        with pytest.raises(K8sClientError, match="Failed to list resources: Forbidden"):
            K8sClient("dev", settings).list_resources(DEPLOYMENTS)

    @pytest.mark.unit
    def test_group_versions(self, api_client, settings):
        responses = {
            "/api": {"versions": ["v1"]},
            "/apis": {
                "groups": [
                    {
                        "name": "apps",
                        "versions": [{"groupVersion": "apps/v1", "version": "v1"}],
                    },
                    {
                        "name": "batch",
                        "versions": [
                            {"groupVersion": "batch/v1", "version": "v1"},
                            {"groupVersion": "batch/v1beta1", "version": "v1beta1"},
                        ],
                    },
                ]
            },
        }
        api_client.call_api.side_effect = lambda path, method, **kw: responses[path]

        versions = K8sClient("dev", settings).list_api_group_versions()

        assert versions == ["v1", "apps/v1", "batch/v1", "batch/v1beta1"]

    @pytest.mark.unit
    def test_get_api_resources_path(self, api_client, settings):
        api_client.call_api.return_value = {"resources": []}
        client = K8sClient("dev", settings)

        client.get_api_resources("", "v1")
        client.get_api_resources("apps", "v1")

        paths = [c.args[0] for c in api_client.call_api.call_args_list]
        assert paths == ["/api/v1", "/apis/apps/v1"]


class TestPodLogs:

    @pytest.mark.unit
    def test_log_options(self, api_client, settings):
        with patch("mcp_k8s.clients.kubernetes.client.CoreV1Api") as core_cls:
            core_cls.return_value.read_namespaced_pod_log.return_value = "line\n"

            logs = K8sClient("dev", settings).get_pod_logs(
                "shop", "web-0", container="app", tail_lines=20, since_seconds=300
            )

        assert logs == "line\n"
        kwargs = core_cls.return_value.read_namespaced_pod_log.call_args.kwargs
        assert kwargs["name"] == "web-0"
        assert kwargs["namespace"] == "shop"
        assert kwargs["container"] == "app"
        assert kwargs["tail_lines"] == 20
        assert kwargs["since_seconds"] == 300
        assert kwargs["previous"] is False

    @pytest.mark.unit
    def test_missing_pod(self, api_client, settings):
        with patch("mcp_k8s.clients.kubernetes.client.CoreV1Api") as core_cls:
            core_cls.return_value.read_namespaced_pod_log.side_effect = ApiException(
                status=404, reason="Not Found"
            )

            with pytest.raises(K8sNotFoundError, match="web-9"):
                K8sClient("dev", settings).get_pod_logs("shop", "web-9")

    @pytest.mark.unit
    def test_connection_failure(self, api_client, settings):
        with patch("mcp_k8s.clients.kubernetes.client.CoreV1Api") as core_cls:
            core_cls.return_value.read_namespaced_pod_log.side_effect = MaxRetryError(
                None, "/api/v1/namespaces/shop/pods/web-0/log", reason="timed out"
            )

            with pytest.raises(K8sClientError, match="Failed to get pod logs"):
                K8sClient("dev", settings).get_pod_logs("shop", "web-0")


class TestMetrics:

    @pytest.mark.unit
    def test_namespaced_pod_metrics(self, api_client, settings):
        with patch("mcp_k8s.clients.kubernetes.client.CustomObjectsApi") as api_cls:
            api = api_cls.return_value
            api.list_namespaced_custom_object.return_value = {"items": [{"a": 1}]}

            items = K8sClient("dev", settings).list_pod_metrics("shop")

        assert items == [{"a": 1}]
        api.list_namespaced_custom_object.assert_called_once_with(
            "metrics.k8s.io", "v1beta1", "shop", "pods"
        )

    @pytest.mark.unit
    def test_metrics_unavailable(self, api_client, settings):
        with patch("mcp_k8s.clients.kubernetes.client.CustomObjectsApi") as api_cls:
            api_cls.return_value.list_cluster_custom_object.side_effect = ApiException(
                status=503, reason="Service Unavailable"
            )

            with pytest.raises(K8sClientError, match="node metrics"):
                K8sClient("dev", settings).list_node_metrics()

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "method,args,message",
        [
            ("list_node_metrics", (), "node metrics"),
            ("list_pod_metrics", (), "pod metrics"),
            ("list_pod_metrics", ("shop",), "pod metrics"),
        ],
    )
    def test_connection_failure(self, api_client, settings, method, args, message):
        refused = MaxRetryError(None, "/apis/metrics.k8s.io", reason="refused")
        with patch("mcp_k8s.clients.kubernetes.client.CustomObjectsApi") as api_cls:
            api_cls.return_value.list_cluster_custom_object.side_effect = refused
            api_cls.return_value.list_namespaced_custom_object.side_effect = refused

            with pytest.raises(K8sClientError, match=message):
                getattr(K8sClient("dev", settings), method)(*args)


class TestContexts:

    @pytest.mark.unit
    def test_list_contexts(self, settings):
        contexts = [{"name": "dev", "context": {"cluster": "kind-dev"}}]
        with patch(
            "mcp_k8s.clients.kubernetes.config.list_kube_config_contexts",
            return_value=(contexts, contexts[0]),
        ) as loader:
            assert K8sClient.list_contexts(settings) == (contexts, contexts[0])

        loader.assert_called_once_with(config_file=settings.kubeconfig_path)

    @pytest.mark.unit
    def test_missing_kubeconfig(self, settings):
        with patch(
            "mcp_k8s.clients.kubernetes.config.list_kube_config_contexts",
            side_effect=ConfigException("Invalid kube-config file. No configuration found."),
        ):
            with pytest.raises(K8sContextError):
                K8sClient.list_contexts(settings)
