# src/kubemetrics/api/app.py
"""
FastAPI application factory for the metrics exporter.

The metrics source and the gauges are passed in at construction so tests
can build isolated apps; `main` wires the real metrics-server source.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from kubemetrics import __version__
from kubemetrics.api.routers import health, metrics
from kubemetrics.collectors.base_collector import BaseMetricsSource
from kubemetrics.collectors.metrics_server_collector import MetricsServerSource
from kubemetrics.core.config import config
from kubemetrics.core.exceptions import ConfigurationError
from kubemetrics.core.k8s_client import ensure_k8s_config
from kubemetrics.exporters.prometheus_exporter import UsageGauges

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load cluster credentials on startup and close the API client on shutdown."""
    logger.info("Starting kube-metrics-exporter %s...", __version__)
    if not await ensure_k8s_config():
        raise ConfigurationError("Could not load Kubernetes configuration (in-cluster or kubeconfig).")
    yield
    logger.info("Shutting down kube-metrics-exporter...")
    await app.state.metrics_source.close()
    logger.info("Kubernetes client closed.")


def create_app(
    source: Optional[BaseMetricsSource] = None,
    gauges: Optional[UsageGauges] = None,
    use_lifespan: bool = False,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        source: Metrics source queried on every scrape. Defaults to the
                Kubernetes metrics API.
        gauges: Gauges the scrape writes into. A fresh registry is created
                when omitted.
        use_lifespan: If True, attach the lifespan handler that loads the
                      Kubernetes configuration. Set to False for testing.

    Returns:
        A configured FastAPI application instance.
    """
    app = FastAPI(
        title="kube-metrics-exporter",
        description="Exposes Kubernetes metrics-server usage as Prometheus gauges.",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan if use_lifespan else None,
    )

    app.state.metrics_source = source if source is not None else MetricsServerSource()
    app.state.usage_gauges = gauges if gauges is not None else UsageGauges()

    app.include_router(metrics.router, tags=["Metrics"])
    app.include_router(health.router, tags=["Health"])

    return app


def run(host: Optional[str] = None, port: Optional[int] = None):
    """Serve the exporter with uvicorn until interrupted."""
    app = create_app(use_lifespan=True)
    uvicorn.run(
        app,
        host=host or config.METRICS_HOST,
        port=port or config.port,
        log_level=config.LOG_LEVEL.lower(),
    )
