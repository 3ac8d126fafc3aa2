from .base_collector import BaseMetricsSource
from .metrics_server_collector import MetricsServerSource

__all__ = [
    "BaseMetricsSource",
    "MetricsServerSource",
]
