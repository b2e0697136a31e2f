"""
Resource Tools.

Tools for listing and fetching any Kubernetes resource by kind, including
custom resources. Objects are projected to compact, kind-specific content.
"""

from datetime import datetime
from typing import Any

from jinja2 import Template, TemplateError
from jinja2.sandbox import SandboxedEnvironment

from mcp_k8s.config import Settings, get_settings
from mcp_k8s.mapper import MapperRegistry, project_list, project_one
from mcp_k8s.models.content import ResourceContent
from mcp_k8s.models.resources import GroupVersionKind
from mcp_k8s.models.responses import ToolResponse, add_execution_metadata
from mcp_k8s.resolver import client_for_context, gvk_to_gvr
from mcp_k8s.tools.base import ToolValidationError, require_params, tool_handler

_templates = SandboxedEnvironment(autoescape=False, keep_trailing_newline=True)


def to_content(projection: Any) -> Any:
    """Serialise a projection to its JSON-ready form."""
    if isinstance(projection, ResourceContent):
        return projection.to_content()
    return projection


def compile_template(source: str) -> Template:
    """
    Compile a Jinja template for rendering raw objects.

    Templates run in a sandbox: they can read any field of the object but
    cannot call into Python internals.

    Raises:
        ToolValidationError: If the template has a syntax error.
    """
    try:
        return _templates.from_string(source)
    except TemplateError as e:
        raise ToolValidationError(f"Failed to parse template: {e}") from e


def render_template(template: Template, item: dict[str, Any]) -> str:
    """
    Render `template` with the object's top-level fields as variables.

    Raises:
        ToolValidationError: If rendering fails.
    """
    try:
        return template.render(item)
    except (TemplateError, TypeError, ValueError) as e:
        raise ToolValidationError(f"Failed to render template: {e}") from e


@tool_handler
def list_k8s_resources(
    context: str,
    kind: str,
    namespace: str = "",
    group: str = "",
    version: str = "v1",
    template: str = "",
    settings: Settings | None = None,
    registry: MapperRegistry | None = None,
) -> ToolResponse:
    """
    List Kubernetes resources of one kind.

    Args:
        context: Kubeconfig context to query. Empty uses the current context.
        kind: Resource kind (any casing, e.g. "pod", "Deployment").
        namespace: Namespace to list. Empty lists across all namespaces.
        group: API group ("" for core, "apps", "batch", ...).
        version: API version.
        settings: Optional settings override for testing.
        registry: Optional mapper registry override for testing.

    Returns:
        ToolResponse with result containing:
        - items: Projected objects
        - count: Number of objects

    Example:
        ```python
        result = list_k8s_resources(
            context="kind-dev", kind="Deployment", group="apps", namespace="web"
        )
        ```
    """
    start_time = datetime.now()
    require_params(kind=kind)
    settings = settings or get_settings()
    version = version or "v1"

    k8s = client_for_context(context, settings)
    gvk = GroupVersionKind(group, version, kind)
    gvr = gvk_to_gvr(context, gvk, client=k8s)

    items = k8s.list_resources(gvr, namespace=namespace or None)
    projected = [to_content(p) for p in project_list(items, gvk, registry)]

    return ToolResponse.success(
        result={"items": projected, "count": len(projected)},
        metadata=add_execution_metadata(
            {},
            start_time,
            context=context,
            resource=gvr.resource,
            api_version=gvk.group_version,
            namespace=namespace or "all",
        ),
    )


@tool_handler
def get_k8s_resource(
    context: str,
    kind: str,
    name: str,
    namespace: str = "",
    group: str = "",
    version: str = "v1",
    template: str = "",
    settings: Settings | None = None,
    registry: MapperRegistry | None = None,
) -> ToolResponse:
    """
    Get a single Kubernetes resource.

    Args:
        context: Kubeconfig context to query. Empty uses the current context.
        kind: Resource kind (any casing).
        name: Object name.
        namespace: Object namespace. Leave empty for cluster-scoped kinds.
        group: API group ("" for core).
        version: API version.
        template: Optional Jinja template rendered against the raw object
            instead of projecting it (e.g. "{{ metadata.name }}: {{ status.phase }}").
        settings: Optional settings override for testing.
        registry: Optional mapper registry override for testing.

    Returns:
        ToolResponse with the projected object as result, or the rendered
        text when a template is given.
    """
    start_time = datetime.now()
    require_params(kind=kind, name=name)
    compiled = compile_template(template) if template else None
    settings = settings or get_settings()
    version = version or "v1"

    k8s = client_for_context(context, settings)
    gvk = GroupVersionKind(group, version, kind)
    gvr = gvk_to_gvr(context, gvk, client=k8s)

    item = k8s.get_resource(gvr, name, namespace=namespace or None)
    if compiled is not None:
        result = render_template(compiled, item)
    else:
        result = to_content(project_one(item, gvk, registry))

    return ToolResponse.success(
        result=result,
        metadata=add_execution_metadata(
            {},
            start_time,
            context=context,
            resource=gvr.resource,
            api_version=gvk.group_version,
        ),
    )
