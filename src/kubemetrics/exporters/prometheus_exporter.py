from __future__ import annotations

import gzip

from prometheus_client import CollectorRegistry, Gauge
from prometheus_client.exposition import choose_encoder, gzip_accepted

from kubemetrics.models.usage import ContainerUsageSample, NodeUsageSample

NODE_LABELS = ("node",)
CONTAINER_LABELS = ("namespace", "pod", "container")


class UsageGauges:
    """Owns a registry holding the four usage gauges.

    Values are overwritten per label tuple and never removed, so a node or
    container that disappears keeps reporting its last value.
    """

    def __init__(self, registry: CollectorRegistry | None = None):
        self.registry = registry if registry is not None else CollectorRegistry()
        self.node_cpu = Gauge(
            "kube_metrics_node_cpu",
            "Node CPU usage from kubernetes metrics server",
            NODE_LABELS,
            registry=self.registry,
        )
        self.node_memory = Gauge(
            "kube_metrics_node_memory",
            "Node memory Usage from kubernetes metrics server",
            NODE_LABELS,
            registry=self.registry,
        )
        self.container_cpu = Gauge(
            "kube_metrics_container_cpu",
            "Container CPU usage from kubernetes metrics server",
            CONTAINER_LABELS,
            registry=self.registry,
        )
        self.container_memory = Gauge(
            "kube_metrics_container_memory",
            "Container memory usage from kubernetes metrics server",
            CONTAINER_LABELS,
            registry=self.registry,
        )

    def record_node(self, sample: NodeUsageSample) -> None:
        self.node_cpu.labels(node=sample.node_name).set(sample.cpu_cores)
        self.node_memory.labels(node=sample.node_name).set(sample.memory_bytes)

    def record_container(self, sample: ContainerUsageSample) -> None:
        labels = {
            "namespace": sample.namespace,
            "pod": sample.pod_name,
            "container": sample.container_name,
        }
        self.container_cpu.labels(**labels).set(sample.cpu_cores)
        self.container_memory.labels(**labels).set(sample.memory_bytes)

    def render(self, accept_header: str | None = None, accept_encoding: str | None = None) -> tuple[bytes, dict]:
        """Encode the registry and return the body with its response headers.

        OpenMetrics is used when the Accept header asks for it; the body is
        gzipped when the Accept-Encoding header allows it.
        """
        encoder, content_type = choose_encoder(accept_header or "")
        body = encoder(self.registry)
        headers = {"Content-Type": content_type}
        if gzip_accepted(accept_encoding or ""):
            body = gzip.compress(body)
            headers["Content-Encoding"] = "gzip"
        return body, headers
