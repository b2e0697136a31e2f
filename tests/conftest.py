"""Shared fixtures for the mcp-k8s test suite."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from mcp_k8s.config import Settings
from mcp_k8s.mapper import build_default_registry


def ago(**delta: float) -> str:
    """RFC 3339 timestamp `delta` before now, e.g. ago(hours=3)."""
    moment = datetime.now(timezone.utc) - timedelta(**delta)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def make_object(name: str, namespace: str | None = None, **fields) -> dict:
    """Build an unstructured object with metadata and extra top-level fields."""
    metadata = {"name": name}
    if namespace is not None:
        metadata["namespace"] = namespace
    return {"metadata": metadata, **fields}


@pytest.fixture
def settings():
    return Settings(_env_file=None, max_log_lines=50, default_log_tail_lines=10)


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def k8s():
    """Patch client construction; yields the client instance tools receive."""
    with patch("mcp_k8s.resolver.K8sClient") as client_cls:
        yield client_cls.return_value


@pytest.fixture
def pod_discovery():
    """Core v1 APIResourceList with pods and its subresources."""
    return {
        "kind": "APIResourceList",
        "groupVersion": "v1",
        "resources": [
            {"name": "pods", "namespaced": True, "kind": "Pod", "shortNames": ["po"]},
            {"name": "pods/log", "namespaced": True, "kind": "Pod"},
            {"name": "nodes", "namespaced": False, "kind": "Node", "shortNames": ["no"]},
            {"name": "configmaps", "namespaced": True, "kind": "ConfigMap"},
        ],
    }
