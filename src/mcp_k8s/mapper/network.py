"""
Networking mappers: Service and Ingress.
"""

from typing import Any

from mcp_k8s.mapper.fields import (
    creation_age,
    get_name,
    get_namespace,
    nested_int,
    nested_list,
    nested_string,
)
from mcp_k8s.mapper.registry import MapperRegistry
from mcp_k8s.models.content import IngressContent, ServiceContent
from mcp_k8s.models.resources import GroupVersionKind

SERVICE_GVK = GroupVersionKind("", "v1", "Service")
INGRESS_GVK = GroupVersionKind("networking.k8s.io", "v1", "Ingress")

INGRESS_PORTS = "80,443"


def map_service(item: dict[str, Any]) -> ServiceContent:
    """
    Project a Service.

    Only the first entry of spec.ports is summarised ("80/TCP"), so
    multi-port services under-report.
    """
    service = ServiceContent(
        name=get_name(item),
        namespace=get_namespace(item),
        type=nested_string(item, "spec", "type"),
        cluster_ip=nested_string(item, "spec", "clusterIP"),
        age=creation_age(item),
    )

    external_ips = nested_list(item, "spec", "externalIPs")
    if external_ips is not None:
        ips = [ip for ip in external_ips if isinstance(ip, str)]
        service.external_ip = ips or None

    ports = nested_list(item, "spec", "ports")
    if ports:
        port = nested_int(ports[0], "port")
        if port is not None:
            protocol = nested_string(ports[0], "protocol")
            service.port = f"{port}/{protocol}" if protocol is not None else str(port)

    return service


def map_ingress(item: dict[str, Any]) -> IngressContent:
    """
    Project an Ingress.

    Hosts are the distinct non-empty rule hostnames in rule order; the
    address joins every load balancer IP and hostname with commas.
    """
    ingress = IngressContent(
        name=get_name(item),
        namespace=get_namespace(item),
        class_=nested_string(item, "spec", "ingressClassName"),
        ports=INGRESS_PORTS,
        age=creation_age(item),
    )

    hosts: list[str] = []
    for rule in nested_list(item, "spec", "rules") or []:
        host = nested_string(rule, "host")
        if host and host not in hosts:
            hosts.append(host)
    ingress.hosts = hosts or None

    addresses: list[str] = []
    for lb in nested_list(item, "status", "loadBalancer", "ingress") or []:
        for field in ("ip", "hostname"):
            value = nested_string(lb, field)
            if value:
                addresses.append(value)
    if addresses:
        ingress.address = ",".join(addresses)

    return ingress


def register(registry: MapperRegistry) -> None:
    registry.register(SERVICE_GVK, map_service)
    registry.register(INGRESS_GVK, map_ingress)
