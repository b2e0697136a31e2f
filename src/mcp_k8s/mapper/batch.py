"""
Batch mappers: Job and CronJob.
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
from mcp_k8s.mapper.registry import MapperRegistry
from mcp_k8s.models.content import CronJobContent, JobContent
from mcp_k8s.models.resources import GroupVersionKind

JOB_GVK = GroupVersionKind("batch", "v1", "Job")
CRONJOB_GVK = GroupVersionKind("batch", "v1", "CronJob")


def map_job(item: dict[str, Any]) -> JobContent:
    """
    Project a Job.

    `completions` is "succeeded/desired" when spec.completions is set and the
    bare succeeded count otherwise, with " (N failed)" appended on failures.
    `duration` is only a state label: "completed" once both start and
    completion times exist, "running" with just a start time.
    """
    succeeded = nested_int(item, "status", "succeeded") or 0
    failed = nested_int(item, "status", "failed") or 0
    desired = nested_int(item, "spec", "completions")

    completions = f"{succeeded}/{desired}" if desired is not None else str(succeeded)
    if failed > 0:
        completions += f" ({failed} failed)"

    duration = None
    if nested_string(item, "status", "startTime"):
        if nested_string(item, "status", "completionTime"):
            duration = "completed"
        else:
            duration = "running"

    return JobContent(
        name=get_name(item),
        namespace=get_namespace(item),
        completions=completions,
        duration=duration,
        age=creation_age(item),
    )


def map_cronjob(item: dict[str, Any]) -> CronJobContent:
    active = nested_list(item, "status", "active")
    return CronJobContent(
        name=get_name(item),
        namespace=get_namespace(item),
        schedule=nested_string(item, "spec", "schedule"),
        suspend=nested_bool(item, "spec", "suspend"),
        active=len(active) if active is not None else None,
        last_schedule=nested_string(item, "status", "lastScheduleTime"),
        age=creation_age(item),
    )


def register(registry: MapperRegistry) -> None:
    registry.register(JOB_GVK, map_job)
    registry.register(CRONJOB_GVK, map_cronjob)
