# src/kubemetrics/api/dependencies.py
"""
FastAPI dependency injection functions.

The metrics source and the gauges are owned by the application instance
(`app.state`) rather than by module globals, so each app, and each test,
gets its own isolated registry.
"""

from fastapi import Request

from kubemetrics.collectors.base_collector import BaseMetricsSource
from kubemetrics.exporters.prometheus_exporter import UsageGauges


async def get_metrics_source(request: Request) -> BaseMetricsSource:
    """Provides the metrics source attached to the running app."""
    return request.app.state.metrics_source


async def get_usage_gauges(request: Request) -> UsageGauges:
    """Provides the usage gauges attached to the running app."""
    return request.app.state.usage_gauges
