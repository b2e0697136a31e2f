"""
Configuration management for MCP K8s.

Supports kubeconfig contexts and, when enabled, in-cluster service account
credentials. Configuration is read from environment variables with sensible
defaults.
"""

import os
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

SERVICE_ACCOUNT_TOKEN_PATH = "/var/run/secrets/kubernetes.io/serviceaccount/token"


class Settings(BaseSettings):
    """
    Server settings.

    Every field can be set from an environment variable carrying the
    MCP_K8S_ prefix, e.g. MCP_K8S_KUBECONFIG_PATH=/etc/kube/config.

    Attributes:
        kubeconfig_path: Path to the kubeconfig file. If not set, the client
            library's default loading rules apply (KUBECONFIG, ~/.kube/config).
        in_cluster: Use the pod service account when no context is requested.
        request_timeout_seconds: Timeout for every cluster API request.
        default_log_tail_lines: Lines returned by pod log queries without a tail.
        max_log_lines: Upper bound on returned log lines (prevents overload).
        log_level: Root log level.
        server_name: Name the server reports to protocol clients.
    """

    model_config = SettingsConfigDict(
        env_prefix="MCP_K8S_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Kubernetes configuration
    kubeconfig_path: str | None = None
    in_cluster: bool = False

    # Request configuration
    request_timeout_seconds: int = 30

    # Pod log line limits
    default_log_tail_lines: int = 10
    max_log_lines: int = 1000

    # Server configuration
    log_level: str = "INFO"
    server_name: str = "mcp-k8s"

    def is_in_cluster(self) -> bool:
        """True when a service account token is mounted in this pod."""
        return os.path.exists(SERVICE_ACCOUNT_TOKEN_PATH)


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once from the environment and reused."""
    return Settings()
