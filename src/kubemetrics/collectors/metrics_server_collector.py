# src/kubemetrics/collectors/metrics_server_collector.py
"""
Reads node and pod usage from the Kubernetes resource metrics API
(metrics.k8s.io), as served by metrics-server.
"""

import asyncio
import logging
from typing import List

from kubemetrics.collectors.base_collector import BaseMetricsSource
from kubemetrics.core.config import config
from kubemetrics.core.k8s_client import create_metrics_api
from kubemetrics.models.usage import ContainerUsageSample, NodeUsageSample

from ..utils.k8s_utils import quantity_to_float

logger = logging.getLogger(__name__)


def _usage_values(usage: dict) -> tuple[float, float]:
    usage = usage or {}
    cpu = quantity_to_float(usage["cpu"]) if "cpu" in usage else 0.0
    memory = quantity_to_float(usage["memory"]) if "memory" in usage else 0.0
    return cpu, memory


class MetricsServerSource(BaseMetricsSource):
    """
    Connects to the aggregated metrics API and converts NodeMetrics and
    PodMetrics objects into usage samples. API errors are raised to the caller.
    """

    def __init__(self, group: str = None, version: str = None):
        self.group = group or config.METRICS_API_GROUP
        self.version = version or config.METRICS_API_VERSION
        self._api = None
        self._api_lock = asyncio.Lock()

    async def _ensure_client(self):
        """
        Lazily create the API client. Scrapes overlapping on first use share
        a single client.
        """
        if self._api:
            return self._api

        async with self._api_lock:
            if not self._api:
                self._api = await create_metrics_api()
                logger.debug("MetricsServerSource initialized for %s/%s.", self.group, self.version)
        return self._api

    async def list_node_usage(self) -> List[NodeUsageSample]:
        api = await self._ensure_client()
        response = await api.list_cluster_custom_object(self.group, self.version, "nodes")

        samples: List[NodeUsageSample] = []
        for item in response.get("items") or []:
            cpu, memory = _usage_values(item.get("usage"))
            samples.append(
                NodeUsageSample(
                    node_name=item["metadata"]["name"],
                    cpu_cores=cpu,
                    memory_bytes=memory,
                )
            )

        logger.debug("Collected usage for %d nodes.", len(samples))
        return samples

    async def list_pod_usage(self, namespace: str = "") -> List[ContainerUsageSample]:
        api = await self._ensure_client()
        if namespace:
            response = await api.list_namespaced_custom_object(self.group, self.version, namespace, "pods")
        else:
            response = await api.list_cluster_custom_object(self.group, self.version, "pods")

        samples: List[ContainerUsageSample] = []
        for pod in response.get("items") or []:
            metadata = pod["metadata"]
            for container in pod.get("containers") or []:
                cpu, memory = _usage_values(container.get("usage"))
                samples.append(
                    ContainerUsageSample(
                        namespace=metadata["namespace"],
                        pod_name=metadata["name"],
                        container_name=container["name"],
                        cpu_cores=cpu,
                        memory_bytes=memory,
                    )
                )

        logger.debug("Collected usage for %d containers.", len(samples))
        return samples

    async def close(self):
        """Close the Kubernetes API client if it exists."""
        if self._api:
            await self._api.api_client.close()
            logger.debug("MetricsServerSource Kubernetes client closed.")
            self._api = None
