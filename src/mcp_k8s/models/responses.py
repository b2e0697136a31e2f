"""
Tool response envelope.

Every tool returns a ToolResponse; the server sends it to the client as JSON
text, so agents always see the same top-level shape whatever the tool.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ToolStatus(str, Enum):
    """Outcome of a tool call: complete, complete with gaps, or failed."""

    SUCCESS = "success"
    PARTIAL = "partial"
    ERROR = "error"


class ToolResponse(BaseModel):
    """
    Envelope returned by every cluster tool.

    `result` holds the tool's payload (projected objects, metrics, logs);
    `warnings` lists what was skipped or cut when status is partial;
    `metadata` always carries `execution_time_ms` and `timestamp`, plus the
    query parameters the tool ran with and, on failure, `error_type`.

    Example:
        ```python
        {
            "status": "partial",
            "result": {"resources": [...], "count": 61},
            "error": null,
            "warnings": ["metrics.k8s.io/v1beta1: Service Unavailable"],
            "metadata": {
                "execution_time_ms": 212,
                "timestamp": "2025-06-01T09:30:00+00:00",
                "context": "kind-dev",
                "group": "all"
            }
        }
        ```
    """

    status: ToolStatus = Field(description="success, partial, or error")
    result: Any = Field(default=None, description="Tool payload")
    error: str | None = Field(default=None, description="Failure description")
    warnings: list[str] = Field(
        default_factory=list, description="Non-fatal issues (skipped or truncated data)"
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Timing and query parameters"
    )

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def success(
        cls,
        result: Any,
        metadata: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> "ToolResponse":
        return cls(
            status=ToolStatus.SUCCESS,
            result=result,
            metadata=metadata or {},
            warnings=warnings or [],
        )

    @classmethod
    def partial(
        cls,
        result: Any,
        warnings: list[str],
        metadata: dict[str, Any] | None = None,
    ) -> "ToolResponse":
        """Result is usable but incomplete; `warnings` says what is missing."""
        return cls(
            status=ToolStatus.PARTIAL,
            result=result,
            warnings=warnings,
            metadata=metadata or {},
        )

    @classmethod
    def error(
        cls,
        error_message: str,
        error_type: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> "ToolResponse":
        """
        Failed call.

        Args:
            error_message: Text shown to the agent.
            error_type: Category stored as metadata["error_type"]
                (e.g., "NotFoundError", "ResolutionError").
            metadata: Execution metadata.
        """
        metadata = dict(metadata or {})
        if error_type:
            metadata["error_type"] = error_type
        return cls(status=ToolStatus.ERROR, error=error_message, metadata=metadata)


def add_execution_metadata(
    metadata: dict[str, Any],
    start_time: datetime,
    **extra: Any,
) -> dict[str, Any]:
    """
    Stamp metadata with elapsed time and completion time.

    Args:
        metadata: Metadata collected so far.
        start_time: When the tool started (naive local time from datetime.now()).
        **extra: Query parameters to record; None values are left out.

    Returns:
        New dict with `execution_time_ms`, `timestamp` and the extras.
    """
    elapsed = datetime.now() - start_time
    return {
        **metadata,
        "execution_time_ms": int(elapsed.total_seconds() * 1000),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        **{k: v for k, v in extra.items() if v is not None},
    }
