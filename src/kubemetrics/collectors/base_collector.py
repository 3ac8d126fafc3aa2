"""
This module defines the abstract base class for metrics sources.
The scrape handler only depends on this interface, so the Kubernetes
metrics API can be swapped for a fake in tests.
"""

from abc import ABC, abstractmethod
from typing import List

from kubemetrics.models.usage import ContainerUsageSample, NodeUsageSample


class BaseMetricsSource(ABC):
    """
    Abstract Base Class for read-only cluster usage sources.
    """

    @abstractmethod
    async def list_node_usage(self) -> List[NodeUsageSample]:
        """
        Return the current usage of every node. Errors from the upstream
        API propagate to the caller.
        """
        pass

    @abstractmethod
    async def list_pod_usage(self, namespace: str = "") -> List[ContainerUsageSample]:
        """
        Return the current usage of every container of every pod in
        `namespace`. An empty namespace means all namespaces.
        """
        pass

    async def close(self):
        """
        Clean up resources (e.g., close API clients).
        """
        pass
