# src/kubemetrics/models/usage.py
"""
Pydantic models for point-in-time resource usage returned by the metrics API.
"""

from pydantic import BaseModel, ConfigDict, Field


class NodeUsageSample(BaseModel):
    """
    Current usage of a single node.

    Attributes:
        node_name: Node name
        cpu_cores: CPU usage in cores
        memory_bytes: Memory usage (working set) in bytes
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    node_name: str = Field(..., description="Node name")
    cpu_cores: float = Field(..., description="CPU usage in cores")
    memory_bytes: float = Field(..., description="Memory usage in bytes")


class ContainerUsageSample(BaseModel):
    """
    Current usage of a single container within a pod.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    namespace: str
    pod_name: str
    container_name: str
    cpu_cores: float = Field(..., description="CPU usage in cores")
    memory_bytes: float = Field(..., description="Memory usage in bytes")
