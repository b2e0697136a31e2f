"""
Event mapper for both event APIs.

core/v1 and events.k8s.io name the same data differently:

    core/v1                         events.k8s.io
    message                         note
    involvedObject                  regarding
    source.component/source.host    reportingController/reportingInstance
    firstTimestamp/lastTimestamp    eventTime

One mapper handles both and emits a single EventContent shape.
"""

from typing import Any

from mcp_k8s.mapper.fields import (
    format_age,
    get_name,
    get_namespace,
    nested_int,
    nested_map,
    nested_string,
    parse_timestamp,
)
from mcp_k8s.mapper.registry import MapperRegistry
from mcp_k8s.models.content import EventContent
from mcp_k8s.models.resources import GroupVersionKind

EVENT_GVKS = (
    GroupVersionKind("", "v1", "Event"),
    GroupVersionKind("events.k8s.io", "v1beta1", "Event"),
    GroupVersionKind("events.k8s.io", "v1", "Event"),
)


def _join(first: Any, second: Any, sep: str) -> str | None:
    parts = [p for p in (first, second) if isinstance(p, str) and p]
    return sep.join(parts) or None


def _involved_object(item: dict[str, Any]) -> str | None:
    ref = nested_map(item, "involvedObject") or nested_map(item, "regarding")
    if ref is None:
        return None
    return _join(ref.get("kind"), ref.get("name"), "/")


def _source(item: dict[str, Any]) -> str | None:
    source = nested_map(item, "source")
    if source is not None:
        return _join(source.get("component"), source.get("host"), "@")
    return _join(
        nested_string(item, "reportingController"),
        nested_string(item, "reportingInstance"),
        "@",
    )


def map_event(item: dict[str, Any]) -> EventContent:
    """
    Project an Event from either API.

    Age is measured from firstTimestamp when the object has one and from
    eventTime otherwise.
    """
    message = nested_string(item, "message")
    if message is None:
        message = nested_string(item, "note")

    count = nested_int(item, "count")
    if count is None:
        count = nested_int(item, "series", "count")

    first_timestamp = nested_string(item, "firstTimestamp")
    event_time = nested_string(item, "eventTime")

    since = parse_timestamp(first_timestamp)
    if not first_timestamp:
        since = parse_timestamp(event_time)

    return EventContent(
        name=get_name(item),
        namespace=get_namespace(item),
        type=nested_string(item, "type"),
        reason=nested_string(item, "reason"),
        message=message,
        involved_object=_involved_object(item),
        source=_source(item),
        count=count,
        first_timestamp=first_timestamp,
        last_timestamp=nested_string(item, "lastTimestamp"),
        event_time=event_time,
        age=format_age(since) if since else None,
    )


def register(registry: MapperRegistry) -> None:
    for gvk in EVENT_GVKS:
        registry.register(gvk, map_event)
