# src/kubemetrics/api/routers/metrics.py
"""
Scrape endpoint: pulls current usage from the metrics source, records it
into the gauges and renders the whole registry.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Response
from fastapi.responses import PlainTextResponse

from kubemetrics.api.dependencies import get_metrics_source, get_usage_gauges
from kubemetrics.collectors.base_collector import BaseMetricsSource
from kubemetrics.exporters.prometheus_exporter import UsageGauges

logger = logging.getLogger(__name__)

router = APIRouter()

SCRAPE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/metrics", methods=SCRAPE_METHODS, include_in_schema=False)
async def scrape(
    accept: Optional[str] = Header(None),
    accept_encoding: Optional[str] = Header(None),
    source: BaseMetricsSource = Depends(get_metrics_source),
    gauges: UsageGauges = Depends(get_usage_gauges),
) -> Response:
    """Refresh the usage gauges and return the exposition.

    Any upstream failure aborts the scrape with a 500 carrying the error
    text. Gauge updates made before the failure are kept.
    """
    try:
        nodes = await source.list_node_usage()
    except Exception as e:
        logger.error("Failed to list node metrics: %s", e)
        return PlainTextResponse(str(e), status_code=500)

    for sample in nodes:
        gauges.record_node(sample)

    try:
        containers = await source.list_pod_usage(namespace="")
    except Exception as e:
        logger.error("Failed to list pod metrics: %s", e)
        return PlainTextResponse(str(e), status_code=500)

    for sample in containers:
        gauges.record_container(sample)

    logger.debug("Scrape recorded %d nodes and %d containers.", len(nodes), len(containers))
    body, headers = gauges.render(accept, accept_encoding)
    content_type = headers.pop("Content-Type")
    return Response(content=body, media_type=content_type, headers=headers)
