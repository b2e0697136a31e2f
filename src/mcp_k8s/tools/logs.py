"""
Pod Log Tools.

Retrieve container logs from a pod, similar to `kubectl logs`.
"""

from datetime import datetime

from mcp_k8s.config import Settings, get_settings
from mcp_k8s.models.responses import ToolResponse, add_execution_metadata
from mcp_k8s.resolver import client_for_context
from mcp_k8s.tools.base import (
    ToolValidationError,
    parse_duration,
    require_params,
    seconds_since,
    tool_handler,
    truncate_logs,
)


@tool_handler
def get_k8s_pod_logs(
    context: str,
    namespace: str,
    name: str,
    container: str = "",
    since: str = "",
    since_time: str = "",
    tail: int | None = None,
    previous: bool = False,
    settings: Settings | None = None,
) -> ToolResponse:
    """
    Get logs from a Kubernetes pod.

    Args:
        context: Kubeconfig context to query.
        namespace: Pod namespace.
        name: Pod name.
        container: Container name. Defaults to the pod's first container.
        since: Relative window (e.g., '30s', '5m', '1h', '1h30m').
            Cannot be combined with since_time.
        since_time: RFC 3339 timestamp. Cannot be combined with since.
        tail: Lines from the end of the log. Defaults to
            settings.default_log_tail_lines; capped at settings.max_log_lines.
        previous: Return logs of the previous terminated container instance.
        settings: Optional settings override for testing.

    Returns:
        ToolResponse with result containing:
        - logs: Log text
        - line_count: Number of returned lines
        - truncated: Whether lines were dropped to honour max_log_lines

    Example:
        ```python
        result = get_k8s_pod_logs(
            context="kind-dev", namespace="web", name="web-0", since="10m"
        )
        ```
    """
    start_time = datetime.now()
    require_params(namespace=namespace, name=name)
    if since and since_time:
        raise ToolValidationError(
            "cannot specify both 'since' and 'sinceTime' parameters"
        )

    settings = settings or get_settings()
    warnings: list[str] = []

    since_seconds = None
    if since:
        since_seconds = parse_duration(since)
    elif since_time:
        since_seconds = seconds_since(since_time)

    if tail is None:
        tail = settings.default_log_tail_lines
    if tail > settings.max_log_lines:
        warnings.append(f"Tail limited to {settings.max_log_lines} lines")
        tail = settings.max_log_lines
    elif tail <= 0:
        # 0 asks for the whole log; keep it bounded
        tail = settings.max_log_lines

    k8s = client_for_context(context, settings)
    logs = k8s.get_pod_logs(
        namespace=namespace,
        name=name,
        container=container or None,
        tail_lines=tail,
        since_seconds=since_seconds,
        previous=previous,
    )

    logs, truncated = truncate_logs(logs, settings.max_log_lines)
    if truncated:
        warnings.append(
            f"Logs truncated to the last {settings.max_log_lines} lines"
        )

    result = {
        "logs": logs,
        "line_count": len(logs.splitlines()),
        "truncated": truncated,
    }
    metadata = add_execution_metadata(
        {},
        start_time,
        context=context,
        namespace=namespace,
        pod=name,
        container=container or None,
        tail_lines=tail,
        since_seconds=since_seconds,
        previous=previous,
    )

    if truncated:
        return ToolResponse.partial(result=result, warnings=warnings, metadata=metadata)
    return ToolResponse.success(result=result, metadata=metadata, warnings=warnings)
