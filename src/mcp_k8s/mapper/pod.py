"""
Pod mapper.

Mirrors `kubectl get pods` (status, ready, restarts, age) and adds the
memory and OOM details needed for memory-pressure analysis.
"""

from typing import Any

from mcp_k8s.mapper.fields import (
    creation_age,
    get_name,
    get_namespace,
    nested_bool,
    nested_int,
    nested_list,
    nested_string,
)
from mcp_k8s.mapper.memory import parse_memory_to_mib
from mcp_k8s.mapper.registry import MapperRegistry
from mcp_k8s.models.content import PodContent
from mcp_k8s.models.resources import GroupVersionKind

POD_GVK = GroupVersionKind("", "v1", "Pod")

OOM_KILLED = "OOMKilled"


def map_pod(item: dict[str, Any]) -> PodContent:
    """
    Project a Pod into PodContent.

    Args:
        item: Unstructured Pod object.

    Returns:
        PodContent. `ready` is "ready/total" over container statuses,
        `restarts` sums restart counts, and `oomKills` counts OOMKilled
        reasons in both `lastState.terminated` and `state.terminated` of
        every container, so one container showing OOMKilled in both places
        counts twice.
    """
    pod = PodContent(
        name=get_name(item),
        namespace=get_namespace(item),
        status=nested_string(item, "status", "phase"),
        age=creation_age(item),
    )

    containers = nested_list(item, "spec", "containers")
    if containers is not None:
        requests = [
            nested_string(c, "resources", "requests", "memory") for c in containers
        ]
        limits = [
            nested_string(c, "resources", "limits", "memory") for c in containers
        ]
        if any(r is not None for r in requests):
            pod.memory_request_mib = sum(
                parse_memory_to_mib(r) for r in requests if r is not None
            )
        if any(lim is not None for lim in limits):
            pod.memory_limit_mib = sum(
                parse_memory_to_mib(lim) for lim in limits if lim is not None
            )

    statuses = nested_list(item, "status", "containerStatuses")
    if statuses is not None:
        ready = 0
        restarts = 0
        oom_kills = 0
        last_reason = None

        for status in statuses:
            if not isinstance(status, dict):
                continue
            if nested_bool(status, "ready"):
                ready += 1
            restarts += nested_int(status, "restartCount") or 0

            reason = nested_string(status, "lastState", "terminated", "reason")
            if reason is not None:
                last_reason = reason
                if reason == OOM_KILLED:
                    oom_kills += 1

            if nested_string(status, "state", "terminated", "reason") == OOM_KILLED:
                oom_kills += 1

        pod.ready = f"{ready}/{len(statuses)}"
        pod.restarts = restarts
        pod.oom_kills = oom_kills
        pod.last_termination_reason = last_reason

    return pod


def register(registry: MapperRegistry) -> None:
    registry.register(POD_GVK, map_pod)
