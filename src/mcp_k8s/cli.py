"""
Command-line entry point.

Runs the MCP server over stdio. stdout carries the protocol stream, so
everything else goes to stderr through logging.
"""

import logging
from typing import Optional

import typer

from mcp_k8s import __version__
from mcp_k8s.config import get_settings
from mcp_k8s.log import configure_logging
from mcp_k8s.server import create_server

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="mcp-k8s",
    help="MCP server providing read-only access to Kubernetes clusters over stdio.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mcp-k8s {__version__}")
        raise typer.Exit()


@app.command()
def main(
    kubeconfig: Optional[str] = typer.Option(
        None, "--kubeconfig", help="Path to the kubeconfig file"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
) -> None:
    """Serve Kubernetes tools, resources and prompts over stdio."""
    settings = get_settings()
    overrides = {}
    if kubeconfig:
        overrides["kubeconfig_path"] = kubeconfig
    if log_level:
        overrides["log_level"] = log_level
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings.log_level)
    server = create_server(settings)

    logger.info("Starting MCP server %s %s", settings.server_name, __version__)
    try:
        server.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    logger.info("Server shutdown complete")
