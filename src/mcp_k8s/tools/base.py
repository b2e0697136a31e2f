"""
Base utilities for tool implementations.

Provides the error-handling decorator every tool is wrapped in, plus small
parsing helpers shared by the tools.
"""

import logging
import re
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Callable, TypeVar

from mcp_k8s.clients.kubernetes import (
    K8sClientError,
    K8sContextError,
    K8sNotFoundError,
)
from mcp_k8s.mapper.fields import parse_timestamp
from mcp_k8s.models.responses import ToolResponse, add_execution_metadata
from mcp_k8s.resolver import ResolutionError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., ToolResponse])

CONTEXT_GUIDANCE = (
    ". To discover available contexts or resolve cluster aliases, "
    "use the kubeconfig://contexts MCP resource"
)

_CONTEXT_FAILURE_PHRASES = (
    "does not exist",
    "not found",
    "no such context",
    "expected object with name",
)

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h|d)")
_DURATION_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": 86400,
}


class ToolValidationError(ValueError):
    """Invalid tool arguments."""

    pass


def require_params(**params: str) -> None:
    """Raise ToolValidationError for any empty required parameter."""
    for name, value in params.items():
        if not value or not value.strip():
            raise ToolValidationError(f"'{name}' is required")


def is_context_error(message: str) -> bool:
    """Whether an error message describes an unknown or unloadable context."""
    lowered = message.lower()
    if "context" not in lowered:
        return False
    return any(phrase in lowered for phrase in _CONTEXT_FAILURE_PHRASES)


def with_context_guidance(message: str) -> str:
    """Append the kubeconfig://contexts hint to context-resolution failures."""
    if is_context_error(message):
        return message + CONTEXT_GUIDANCE
    return message


def _error_response(
    message: str, error_type: str, start_time: datetime
) -> ToolResponse:
    return ToolResponse.error(
        error_message=with_context_guidance(message),
        error_type=error_type,
        metadata=add_execution_metadata({}, start_time),
    )


def tool_handler(func: F) -> F:
    """
    Decorator for tool functions that provides:
    - Exception to error-response conversion
    - Execution timing
    - Context guidance on kubeconfig context failures

    Args:
        func: Tool function to wrap.

    Returns:
        Wrapped function that always returns a ToolResponse.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> ToolResponse:
        start_time = datetime.now()

        try:
            result = func(*args, **kwargs)

            if "execution_time_ms" not in result.metadata:
                result.metadata = add_execution_metadata(result.metadata, start_time)
            return result

        except ToolValidationError as e:
            error_type, message = "ValidationError", str(e)
        except K8sNotFoundError as e:
            error_type, message = "NotFoundError", str(e)
        except ResolutionError as e:
            error_type, message = "ResolutionError", str(e)
        except K8sContextError as e:
            error_type, message = "ContextError", str(e)
        except K8sClientError as e:
            error_type, message = "KubernetesError", str(e)
        except Exception as e:
            logger.exception("Unexpected error in %s", func.__name__)
            error_type, message = type(e).__name__, f"Unexpected error: {e}"

        logger.warning("%s failed (%s): %s", func.__name__, error_type, message)
        return _error_response(message, error_type, start_time)

    return wrapper  # type: ignore


def truncate_logs(logs: str, max_lines: int) -> tuple[str, bool]:
    """
    Truncate logs to a maximum number of lines.

    Args:
        logs: Log content.
        max_lines: Maximum number of lines to keep (the most recent ones).

    Returns:
        Tuple of (truncated_logs, was_truncated).
    """
    lines = logs.splitlines()
    if len(lines) <= max_lines:
        return logs, False

    return "\n".join(lines[-max_lines:]), True


def parse_duration(duration: str) -> int:
    """
    Parse a duration string to seconds.

    Args:
        duration: Go-style duration (e.g., '30s', '1.5h', '1h30m', '500ms'),
            with 'd' accepted for days.

    Returns:
        Duration in whole seconds. A positive window shorter than one second
        becomes 1, the smallest window the API accepts.

    Raises:
        ToolValidationError: If duration format is invalid.
    """
    value = duration.strip().lower()
    parts = _DURATION_PART.findall(value)
    if not parts or "".join(n + u for n, u in parts) != value:
        raise ToolValidationError(
            f"Invalid duration format: {duration!r}. Use a number with a unit "
            "of ms, s, m, h or d (e.g., '500ms', '5m', '1.5h', '1h30m')."
        )
    seconds = sum(float(n) * _DURATION_SECONDS[u] for n, u in parts)
    if seconds <= 0:
        return 0
    return max(1, int(seconds))


def seconds_since(timestamp: str, now: datetime | None = None) -> int:
    """
    Convert an RFC 3339 timestamp to a seconds offset from now.

    Raises:
        ToolValidationError: If the timestamp can't be parsed or is in the future.
    """
    since = parse_timestamp(timestamp)
    if since is None:
        raise ToolValidationError(
            f"Invalid since_time {timestamp!r}: expected RFC 3339 "
            "(e.g., 2025-01-01T12:00:00Z)"
        )

    now = now or datetime.now(timezone.utc)
    seconds = int((now - since).total_seconds())
    if seconds <= 0:
        raise ToolValidationError(f"since_time {timestamp!r} is in the future")
    return seconds
